"""Failure categories raised by the ChatGPT service layer."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(eq=False)
class ServiceError(Exception):
    """Base exception for service layer failures.

    ``status_code`` carries the remote HTTP status when the upstream API
    answered; ``http_status`` is the status to send back to our own caller.
    """

    message: str
    status_code: int | None = None

    code: ClassVar[str] = "service_error"
    default_status: ClassVar[int] = 500

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message

    @property
    def http_status(self) -> int:
        return self.status_code or self.default_status


class ChatgptServiceError(ServiceError):
    """Raised when ChatgptService fails to return a completion."""

    code = "chatgpt_error"


class ConfigurationError(ChatgptServiceError):
    """API key or URL missing, or the key is still the placeholder."""

    code = "configuration_error"


class UpstreamError(ChatgptServiceError):
    """The API answered with a non-2xx status."""

    code = "upstream_error"
    default_status = 502


class NetworkUnreachableError(ChatgptServiceError):
    """The request went out but no response came back."""

    code = "network_unreachable"
    default_status = 502


class UpstreamMalformedError(ChatgptServiceError):
    """A 2xx response whose body holds no usable completion."""

    code = "upstream_malformed"


class InternalServiceError(ChatgptServiceError):
    """Local failure while building or sending the request."""

    code = "internal_error"
