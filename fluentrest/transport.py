"""Fetch-style transport primitive.

A transport takes a target URI plus :class:`FetchOptions` and returns a
:class:`FetchResponse`. It is the only I/O the library performs. The default
:class:`HttpxTransport` issues the call through ``httpx.AsyncClient`` and
races it against the request's :class:`AbortSignal`.
"""

import asyncio
import json
from dataclasses import dataclass
from typing import Any, Protocol

import httpx
import structlog

from .exceptions import BodyConsumedError, RequestAbortedError
from .models import ResponseType

logger = structlog.get_logger()


class AbortSignal:
    """Read side of an :class:`AbortController`."""

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._reason: BaseException | None = None

    @property
    def aborted(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> BaseException | None:
        return self._reason

    async def wait(self) -> None:
        """Suspend until the signal is aborted."""
        await self._event.wait()

    def raise_if_aborted(self) -> None:
        if self.aborted:
            raise self._error()

    def _error(self) -> BaseException:
        return self._reason if self._reason is not None else RequestAbortedError()

    def _abort(self, reason: BaseException | None) -> None:
        if self.aborted:
            return
        self._reason = reason
        self._event.set()


class AbortController:
    """Owns an :class:`AbortSignal` and fires it at most once."""

    def __init__(self) -> None:
        self.signal = AbortSignal()

    def abort(self, reason: BaseException | None = None) -> None:
        """Abort the signal; a pending fetch raises ``reason``."""
        self.signal._abort(reason)


@dataclass
class FetchOptions:
    """Options of a single fetch call."""

    method: str
    headers: httpx.Headers | None = None
    body: str | None = None
    signal: AbortSignal | None = None


class FetchResponse:
    """
    Response returned by a transport.

    Mirrors a fetch response: metadata attributes plus ``json()`` and
    ``text()`` coroutines. The body may be read once; any second read raises
    :class:`BodyConsumedError`.
    """

    def __init__(
        self,
        status: int,
        headers: httpx.Headers | None = None,
        content: bytes = b"",
        status_text: str = "",
        redirected: bool = False,
        url: str = "",
        type: ResponseType = ResponseType.basic,
        encoding: str | None = None,
    ) -> None:
        self.status = status
        self.headers = httpx.Headers(headers)
        self.status_text = status_text
        self.redirected = redirected
        self.url = url
        self.type = type
        self._content = content
        self._encoding = encoding
        self._body_used = False

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "FetchResponse":
        """Wrap a fully read ``httpx.Response``."""
        return cls(
            status=response.status_code,
            headers=response.headers,
            content=response.content,
            status_text=response.reason_phrase,
            redirected=bool(response.history),
            url=str(response.url),
            encoding=response.encoding,
        )

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def body_used(self) -> bool:
        return self._body_used

    def _consume(self) -> bytes:
        if self._body_used:
            raise BodyConsumedError()
        self._body_used = True
        return self._content

    async def text(self) -> str:
        """Read the body as text."""
        return self._consume().decode(self._encoding or "utf-8", errors="replace")

    async def json(self) -> Any:
        """Read the body and parse it as JSON.

        Raises:
            json.JSONDecodeError: If the body is not valid JSON.
        """
        return json.loads(await self.text())

    def __repr__(self) -> str:
        return f"<FetchResponse [{self.status}] {self.url}>"


class Transport(Protocol):
    """
    Anything able to perform a fetch.

    Implementations must honor ``options.signal``: once it is aborted the
    pending ``fetch`` has to raise ``signal.reason``. Request timeouts are
    delivered only through that signal, so a transport that ignores it is
    never interrupted.
    """

    async def fetch(self, uri: str, options: FetchOptions) -> FetchResponse: ...


class HttpxTransport:
    """
    Transport backed by ``httpx.AsyncClient``.

    Without an injected client each call opens and closes its own
    ``httpx.AsyncClient``. An injected client is used as-is and left open;
    its lifecycle belongs to the caller.

    Example:
        ```python
        transport = HttpxTransport(client=httpx.AsyncClient(verify=False))
        client = RestClient.builder().transport(transport).build()
        ```
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        verify_ssl: bool = True,
        follow_redirects: bool = True,
    ) -> None:
        self._client = client
        self.verify_ssl = verify_ssl
        self.follow_redirects = follow_redirects

    async def fetch(self, uri: str, options: FetchOptions) -> FetchResponse:
        """
        Send one request and return its fully read response.

        Raises:
            httpx.HTTPError: On transport errors
            RequestAbortedError: When ``options.signal`` is aborted first
        """
        signal = options.signal
        if signal is not None:
            signal.raise_if_aborted()

        if self._client is not None:
            return await self._race(self._client, uri, options)

        # Timeouts are driven by the abort signal, not by httpx
        async with httpx.AsyncClient(
            timeout=None,
            verify=self.verify_ssl,
            follow_redirects=self.follow_redirects,
        ) as client:
            return await self._race(client, uri, options)

    async def _race(
        self, client: httpx.AsyncClient, uri: str, options: FetchOptions
    ) -> FetchResponse:
        request = client.build_request(
            options.method,
            uri,
            headers=options.headers,
            content=options.body,
        )
        sending = asyncio.ensure_future(
            client.send(request, follow_redirects=self.follow_redirects)
        )
        if options.signal is None:
            return FetchResponse.from_httpx(await sending)

        aborting = asyncio.ensure_future(options.signal.wait())
        try:
            await asyncio.wait({sending, aborting}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            aborting.cancel()
            if not sending.done():
                sending.cancel()
                await asyncio.gather(sending, return_exceptions=True)

        if sending.done() and not sending.cancelled():
            return FetchResponse.from_httpx(sending.result())

        logger.debug("Fetch aborted", method=options.method, uri=uri)
        raise options.signal._error()
