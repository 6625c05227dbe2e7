"""Maps prompt submissions onto completion fetches and view fields."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from fastapi import status

from app.exceptions import ChatgptServiceError
from app.models import ChatView, PromptIn

logger = logging.getLogger(__name__)


class CompletionFetcher(Protocol):
    async def fetch(self, prompt: str) -> str: ...


@dataclass(frozen=True)
class ChatResult:
    """A view plus the HTTP status to send it with."""

    view: ChatView
    status_code: int = status.HTTP_200_OK


class ChatgptHandler:
    """Request handler sitting between the routes and ChatgptService.

    Holds no state of its own; every call is a single fetch.
    """

    def __init__(self, fetcher: CompletionFetcher) -> None:
        self._fetcher = fetcher

    def show_form(self) -> ChatView:
        return ChatView()

    async def submit(self, payload: PromptIn) -> ChatResult:
        prompt = payload.prompt
        try:
            text = await self._fetcher.fetch(prompt)
        except ChatgptServiceError as exc:
            logger.error(
                "Prompt submission failed",
                extra={
                    "category": exc.code,
                    "status_code": exc.status_code,
                    "detail": exc.message,
                },
            )
            return ChatResult(
                view=ChatView(prompt=prompt, error=exc.message),
                status_code=exc.http_status,
            )

        return ChatResult(view=ChatView(prompt=prompt, response=text))
