"""Dependency providers for the FastAPI application."""

import httpx
from fastapi import Depends
from starlette.requests import HTTPConnection

from app.config import Settings, get_settings
from app.services.chat_handler import ChatgptHandler
from app.services.chatgpt_service import ChatgptService


async def get_http_client(connection: HTTPConnection) -> httpx.AsyncClient:
    """Retrieve the shared AsyncClient from application state."""

    return connection.app.state.http_client  # type: ignore[return-value]


async def get_chatgpt_service(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> ChatgptService:
    """Dependency provider for ChatgptService."""

    return ChatgptService(client=client, settings=settings)


async def get_chatgpt_handler(
    service: ChatgptService = Depends(get_chatgpt_service),
) -> ChatgptHandler:
    """Dependency provider for ChatgptHandler."""

    return ChatgptHandler(service)
