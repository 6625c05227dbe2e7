"""Application settings loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strongly typed application configuration.

    Credentials default to empty strings so the service can start without
    them; a missing key or URL is reported per request instead.
    """

    chatgpt_api_key: str = Field(default="", alias="CHATGPT_API_KEY")
    chatgpt_api_url: str = Field(default="", alias="CHATGPT_API_URL")
    chatgpt_model: str = Field(default="gpt-3.5-turbo", alias="CHATGPT_MODEL")
    max_tokens: int = Field(default=150, alias="CHATGPT_MAX_TOKENS")
    chat_timeout: float = Field(default=30.0, alias="CHAT_TIMEOUT", description="Seconds")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: Literal["debug", "info", "warning", "error", "critical"] = Field(
        default="info", alias="LOG_LEVEL"
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of settings."""

    return Settings()
