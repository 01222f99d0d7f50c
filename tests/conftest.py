"""Pytest configuration for fluentrest tests."""

import asyncio
from typing import Any, Callable

import httpx
import pytest

from fluentrest import FetchOptions, FetchResponse, HttpxTransport


@pytest.fixture(autouse=True)
def configure_structlog():
    """Configure structlog for testing."""
    import structlog

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


class RecordingTransport:
    """Transport double that records calls and replays canned responses.

    ``hang=True`` makes every fetch wait until its abort signal fires.
    """

    def __init__(
        self,
        response: FetchResponse | Callable[[], FetchResponse] | None = None,
        hang: bool = False,
        delay: float = 0,
        error: BaseException | None = None,
    ) -> None:
        self.response = response
        self.hang = hang
        self.delay = delay
        self.error = error
        self.calls: list[tuple[str, FetchOptions]] = []

    async def fetch(self, uri: str, options: FetchOptions) -> FetchResponse:
        self.calls.append((uri, options))
        if self.hang:
            assert options.signal is not None
            await options.signal.wait()
            raise options.signal.reason
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        if callable(self.response):
            return self.response()
        if self.response is not None:
            return self.response
        return FetchResponse(200, status_text="OK")


def json_response(payload: bytes | str, status: int = 200, **kwargs: Any) -> FetchResponse:
    """Build a FetchResponse with a JSON content type."""
    content = payload.encode() if isinstance(payload, str) else payload
    return FetchResponse(
        status,
        headers=httpx.Headers({"Content-Type": "application/json"}),
        content=content,
        **kwargs,
    )


def text_response(body: str, status: int = 200, **kwargs: Any) -> FetchResponse:
    """Build a FetchResponse with a plain-text content type."""
    return FetchResponse(
        status,
        headers=httpx.Headers({"Content-Type": "text/plain"}),
        content=body.encode(),
        **kwargs,
    )


def mock_httpx_transport(handler: Callable[[httpx.Request], Any]) -> HttpxTransport:
    """HttpxTransport over an httpx.MockTransport handler."""
    return HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


@pytest.fixture
def transport():
    """A RecordingTransport answering 200 with an empty body."""
    return RecordingTransport()
