"""Pydantic models shared across application layers."""

from pydantic import BaseModel, Field


class PromptIn(BaseModel):
    """Incoming prompt submission, from JSON or a form post."""

    prompt: str = Field(min_length=1, description="User supplied text prompt.")


class ChatView(BaseModel):
    """Fields rendered into the chat page or returned as JSON."""

    prompt: str | None = None
    response: str | None = None
    error: str | None = None


class ErrorResponse(BaseModel):
    """Body returned to JSON clients when a submission is rejected."""

    error: str
    detail: str | None = None
