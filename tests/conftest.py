"""Shared pytest fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

API_URL = "https://api.openai.com/v1/chat/completions"

os.environ.setdefault("CHATGPT_API_KEY", "test-key")
os.environ.setdefault("CHATGPT_API_URL", API_URL)
os.environ.setdefault("ENVIRONMENT", "test")

from app.config import get_settings  # noqa: E402
from app.main import create_app  # noqa: E402


@pytest.fixture(autouse=True)
def configure_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure required environment variables are present during tests."""

    monkeypatch.setenv("CHATGPT_API_KEY", "test-key")
    monkeypatch.setenv("CHATGPT_API_URL", API_URL)
    monkeypatch.setenv("ENVIRONMENT", "test")
    get_settings.cache_clear()


@pytest.fixture
def app():
    return create_app()
