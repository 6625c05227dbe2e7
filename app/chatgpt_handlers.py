"""HTTP handlers for the ChatGPT prompt page and JSON API."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any

from fastapi import Depends, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from app.dependencies import get_chatgpt_handler
from app.models import ChatView, ErrorResponse, PromptIn
from app.services.chat_handler import ChatgptHandler

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

TEMPLATE_NAME = "chatgpt.html"

UNPROCESSABLE_STATUS = 422


class PromptRejected(ValueError):
    """Submission failed validation before reaching ChatgptService."""

    def __init__(self, error: str, detail: str, prompt: str | None = None) -> None:
        super().__init__(detail)
        self.error = error
        self.detail = detail
        self.prompt = prompt


async def show_chat_page(
    request: Request,
    handler: Annotated[ChatgptHandler, Depends(get_chatgpt_handler)],
) -> Response:
    """Initial, unsubmitted page."""

    view = handler.show_form()
    if _wants_json(request):
        return JSONResponse(view.model_dump())
    return _render(request, view)


async def submit_prompt(
    request: Request,
    handler: Annotated[ChatgptHandler, Depends(get_chatgpt_handler)],
) -> Response:
    """Accept a prompt as JSON or form data and relay it to ChatGPT."""

    as_json = _is_json_body(request)
    try:
        payload = await _read_prompt(request, as_json)
    except PromptRejected as exc:
        logger.info(
            "Prompt rejected",
            extra={"error": exc.error, "detail": exc.detail},
        )
        if as_json:
            return JSONResponse(
                ErrorResponse(error=exc.error, detail=exc.detail).model_dump(),
                status_code=UNPROCESSABLE_STATUS,
            )
        return _render(
            request,
            ChatView(prompt=exc.prompt, error=exc.detail),
            status_code=UNPROCESSABLE_STATUS,
        )

    result = await handler.submit(payload)
    if as_json:
        return JSONResponse(result.view.model_dump(), status_code=result.status_code)
    return _render(request, result.view, status_code=result.status_code)


async def _read_prompt(request: Request, as_json: bool) -> PromptIn:
    """Parse and validate the submitted prompt."""

    raw: Any
    if as_json:
        try:
            raw = await request.json()
        except ValueError as exc:
            raise PromptRejected("invalid_payload", "Invalid JSON payload.") from exc
    else:
        form = await request.form()
        raw = dict(form)

    if not isinstance(raw, dict):
        raise PromptRejected("invalid_payload", "Request body must be an object.")

    submitted = raw.get("prompt")
    echo = submitted if isinstance(submitted, str) else None

    try:
        payload = PromptIn.model_validate(raw)
    except ValidationError as exc:
        raise PromptRejected(
            "validation_error", "Prompt must be a non-empty string.", echo
        ) from exc

    return payload


def _render(
    request: Request, view: ChatView, status_code: int = status.HTTP_200_OK
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        TEMPLATE_NAME,
        view.model_dump(),
        status_code=status_code,
    )


def _is_json_body(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower() == "application/json"


def _wants_json(request: Request) -> bool:
    accept = request.headers.get("accept", "")
    return "application/json" in accept and "text/html" not in accept
