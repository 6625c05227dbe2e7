"""Simple command-line client for manual testing."""

from __future__ import annotations

import argparse
import asyncio
import logging
import time
from typing import Any

import httpx

DEFAULT_URL = "http://127.0.0.1:8000/chatgpt"

logger = logging.getLogger("chat_client")


async def send_prompt(client: httpx.AsyncClient, url: str, prompt: str) -> dict[str, Any]:
    """POST the prompt as JSON and return the decoded view fields."""

    response = await client.post(url, json={"prompt": prompt})
    try:
        body = response.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        return {"status_code": response.status_code, "error": response.text}
    return {"status_code": response.status_code, **body}


async def run_client(
    url: str,
    prompt: str,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """Send one prompt to the service and log the outcome."""

    start = time.perf_counter()

    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        result = await send_prompt(client, url, prompt)

    elapsed = time.perf_counter() - start
    if result.get("response") is None:
        logger.error(
            "Request failed (%s): %s",
            result["status_code"],
            result.get("error") or result.get("detail"),
        )
        return 1

    logger.info("Received response in %.2fs", elapsed)
    print(result["response"])
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Test client for the ChatGPT relay service.")
    parser.add_argument("--url", default=DEFAULT_URL, help="Service URL (default: %(default)s)")
    parser.add_argument("--prompt", required=True, help="Prompt to send.")
    parser.add_argument(
        "--timeout", type=float, default=60.0, help="Seconds to wait for the completion."
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    try:
        code = asyncio.run(run_client(args.url, args.prompt, args.timeout))
    except KeyboardInterrupt:  # pragma: no cover - manual usage only
        return
    except httpx.HTTPError as exc:
        logger.error("Could not reach service: %s", exc)
        raise SystemExit(1) from exc
    raise SystemExit(code)


if __name__ == "__main__":  # pragma: no cover
    main()
