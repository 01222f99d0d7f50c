"""Request dispatch: URI assembly, transport call and timeout abort."""

import asyncio
from collections.abc import Coroutine
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
import structlog

from .exceptions import RequestTimeoutError
from .models import ResponseHandler
from .resolver import ResponseResolver
from .transport import AbortController, FetchOptions, FetchResponse, HttpxTransport, Transport
from .utils import create_uri, serialize_body

if TYPE_CHECKING:
    from .request import RequestBuilder

T = TypeVar("T")

logger = structlog.get_logger()


class PendingResponse:
    """
    Memoized handle on an in-flight fetch.

    The dispatch coroutine becomes a task as soon as an event loop is
    running (immediately when created inside one, otherwise on the first
    await). Every awaiter shares that task, so the transport runs once, and
    each awaiter is shielded so cancelling one leaves the others waiting.
    """

    def __init__(self, dispatch: Coroutine[Any, Any, FetchResponse]) -> None:
        self._dispatch: Coroutine[Any, Any, FetchResponse] | None = dispatch
        self._task: asyncio.Future[FetchResponse] | None = None
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return
        self._start()

    def _start(self) -> "asyncio.Future[FetchResponse]":
        if self._task is None:
            assert self._dispatch is not None
            self._task = asyncio.ensure_future(self._dispatch)
            self._dispatch = None
        return self._task

    def __await__(self):
        return asyncio.shield(self._start()).__await__()


class RequestRetriever:
    """Turns a finished RequestBuilder into a transport call."""

    def __init__(
        self,
        handler: ResponseHandler | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._handler = handler
        self._transport = transport or HttpxTransport()

    def retrieve(self, builder: "RequestBuilder[T]") -> ResponseResolver[T]:
        uri = create_uri(
            builder.get_uri(),
            base_uri=builder.get_base_uri(),
            params=builder.get_params(),
        )

        headers = httpx.Headers(builder.get_default_headers())
        headers.update(builder.get_headers())

        options = FetchOptions(
            method=builder.get_method().value,
            headers=headers,
            body=serialize_body(builder.get_body()),
        )

        pending = PendingResponse(self._perform(uri, options, builder.get_timeout()))
        return ResponseResolver(pending, self._handler)

    async def _perform(
        self, uri: str, options: FetchOptions, timeout_ms: int | None
    ) -> FetchResponse:
        controller = AbortController()
        options.signal = controller.signal

        logger.debug(
            "Dispatching request",
            method=options.method,
            uri=uri,
            timeout_ms=timeout_ms,
        )

        timer: asyncio.TimerHandle | None = None
        if timeout_ms is not None:
            timer = asyncio.get_running_loop().call_later(
                timeout_ms / 1000,
                controller.abort,
                RequestTimeoutError(timeout_ms),
            )
        try:
            response = await self._transport.fetch(uri, options)
        except RequestTimeoutError:
            logger.debug("Request aborted", method=options.method, uri=uri, timeout_ms=timeout_ms)
            raise
        finally:
            if timer is not None:
                timer.cancel()

        logger.debug("Response received", method=options.method, uri=uri, status=response.status)
        return response
