"""Web relay between a prompt form and the ChatGPT chat completions API."""

__version__ = "0.1.0"
