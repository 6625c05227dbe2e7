import json

import httpx
import pytest

from client.chat_client import parse_args, run_client, send_prompt


@pytest.mark.asyncio
async def test_send_prompt_posts_json() -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        assert json.loads(request.content) == {"prompt": "hello"}
        return httpx.Response(200, json={"prompt": "hello", "response": "hi", "error": None})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        result = await send_prompt(client, "http://testserver/chatgpt", "hello")

    assert result == {"status_code": 200, "prompt": "hello", "response": "hi", "error": None}


def test_parse_args_defaults() -> None:
    args = parse_args(["--prompt", "hello"])

    assert args.url == "http://127.0.0.1:8000/chatgpt"
    assert args.timeout == 60.0


@pytest.mark.asyncio
async def test_send_prompt_non_json_reply() -> None:
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="Internal Server Error")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        result = await send_prompt(client, "http://testserver/chatgpt", "hello")

    assert result == {"status_code": 500, "error": "Internal Server Error"}


@pytest.mark.asyncio
async def test_run_client_reports_failure() -> None:
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="Internal Server Error")

    code = await run_client(
        "http://testserver/chatgpt",
        "hello",
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )

    assert code == 1


@pytest.mark.asyncio
async def test_run_client_prints_response(capsys: pytest.CaptureFixture[str]) -> None:
    async def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"prompt": "hello", "response": "hi", "error": None})

    code = await run_client(
        "http://testserver/chatgpt",
        "hello",
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )

    assert code == 0
    assert capsys.readouterr().out == "hi\n"
