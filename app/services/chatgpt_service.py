"""Adapter for the ChatGPT chat completions API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.config import Settings
from app.exceptions import (
    ChatgptServiceError,
    ConfigurationError,
    InternalServiceError,
    NetworkUnreachableError,
    UpstreamError,
    UpstreamMalformedError,
)

logger = logging.getLogger(__name__)

PLACEHOLDER_API_KEY = "your_api_key_here"

MISSING_API_KEY = "ChatGPT API Key is not configured."
MISSING_API_URL = "ChatGPT API URL is not configured."
NO_CONTENT = "No valid response content received from ChatGPT API."
UNPARSEABLE_CONTENT = "Could not parse ChatGPT response content."
GENERIC_UPSTREAM_ERROR = "Error communicating with ChatGPT API."
NO_RESPONSE = "No response received from ChatGPT API. Check network or API status."
UNEXPECTED_ERROR = "An unexpected error occurred while contacting ChatGPT API."


class ChatgptService:
    """Wrapper around a ChatGPT-compatible chat completions endpoint.

    Credentials are read from the injected settings on every call, so a
    missing key fails the request rather than application startup.
    """

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    async def fetch(self, prompt: str) -> str:
        """Return the trimmed completion text for ``prompt``.

        Raises one of the ``ChatgptServiceError`` subclasses on failure.
        """

        api_key = self._settings.chatgpt_api_key
        api_url = self._settings.chatgpt_api_url

        if not api_key or api_key == PLACEHOLDER_API_KEY:
            raise self._failure(ConfigurationError(MISSING_API_KEY))
        if not api_url:
            raise self._failure(ConfigurationError(MISSING_API_URL))

        payload = {
            "model": self._settings.chatgpt_model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self._settings.max_tokens,
        }

        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

        try:
            response = await self._client.post(
                api_url,
                headers=headers,
                json=payload,
                timeout=self._settings.chat_timeout,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise self._failure(
                UpstreamError(
                    _error_message(exc.response), status_code=exc.response.status_code
                ),
                response_text=exc.response.text,
            ) from exc
        except (httpx.UnsupportedProtocol, httpx.LocalProtocolError) as exc:
            # Raised before anything is sent: bad URL scheme, illegal header value
            raise self._failure(InternalServiceError(str(exc) or UNEXPECTED_ERROR)) from exc
        except httpx.TransportError as exc:
            raise self._failure(NetworkUnreachableError(NO_RESPONSE)) from exc
        except Exception as exc:
            raise self._failure(
                InternalServiceError(str(exc) or UNEXPECTED_ERROR), exc_info=exc
            ) from exc

        return self._completion_text(response)

    def _completion_text(self, response: httpx.Response) -> str:
        try:
            data: Any = response.json()
        except ValueError:
            data = None

        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices:
            logger.warning("Empty or unexpected ChatGPT response", extra={"raw_response": data})
            raise self._failure(UpstreamMalformedError(NO_CONTENT))

        choice = choices[0]
        if isinstance(choice, dict):
            message = choice.get("message")
            content = message.get("content") if isinstance(message, dict) else None
            if isinstance(content, str) and content:
                return content.strip()

            # Completions-style payload
            text = choice.get("text")
            if isinstance(text, str) and text:
                logger.warning(
                    "Received legacy 'text' completion format",
                    extra={"model": self._settings.chatgpt_model},
                )
                return text.strip()

        logger.warning("Unexpected structure in choices[0]", extra={"choice": choice})
        raise self._failure(UpstreamMalformedError(UNPARSEABLE_CONTENT))

    @staticmethod
    def _failure(
        error: ChatgptServiceError,
        response_text: str | None = None,
        exc_info: BaseException | None = None,
    ) -> ChatgptServiceError:
        extra: dict[str, Any] = {
            "category": error.code,
            "detail": error.message,
            "status_code": error.status_code,
        }
        if response_text is not None:
            extra["response_text"] = response_text
        logger.error("ChatGPT request failed", extra=extra, exc_info=exc_info)
        return error


def _error_message(response: httpx.Response) -> str:
    """Pull a human readable message out of an error response body."""

    try:
        body: Any = response.json()
    except ValueError:
        body = response.text

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            message = error.get("message")
            if isinstance(message, str) and message:
                return message
    elif isinstance(body, str) and body:
        return body

    return GENERIC_UPSTREAM_ERROR
