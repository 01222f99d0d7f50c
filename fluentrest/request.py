"""Fluent per-request builder."""

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

import httpx

from .config import validate_timeout
from .models import HttpMethod, ResponseHandler
from .resolver import ResponseResolver
from .retriever import RequestRetriever
from .transport import Transport
from .utils import QueryPairs, QueryParamTypes, to_query_pairs

T = TypeVar("T")


class RequestBuilder(Generic[T]):
    """
    Accumulates the settings of one request on top of the client defaults.

    Setters mutate the builder and return it for chaining. A builder is
    single-use: ``retrieve()`` dispatches it, and reusing it afterwards is
    not supported.

    Example:
        ```python
        entity = await (
            client.get()
            .uri("/search")
            .param("tag", "a")
            .param("tag", "b")
            .header("X-Trace", "1")
            .timeout(2000)
            .retrieve()
            .to_entity()
        )
        ```
    """

    def __init__(
        self,
        method: HttpMethod,
        base_uri: str | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: int | None = None,
        handler: ResponseHandler | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._method = method
        self._base_uri = base_uri or ""
        self._uri = ""
        self._default_headers = httpx.Headers(headers)
        self._headers = httpx.Headers()
        self._params: QueryPairs = []
        self._body: Any = None
        self._timeout = timeout
        self._handler = handler
        self._transport = transport

    def base_uri(self, base_uri: str) -> "RequestBuilder[T]":
        self._base_uri = base_uri
        return self

    def uri(self, uri: str) -> "RequestBuilder[T]":
        """Path appended verbatim to the base URI."""
        self._uri = uri
        return self

    def timeout(self, timeout: int | None) -> "RequestBuilder[T]":
        """Timeout in milliseconds; None disables it."""
        validate_timeout(timeout)
        self._timeout = timeout
        return self

    def headers(self, headers: Mapping[str, str]) -> "RequestBuilder[T]":
        """Merge ``headers`` into the request headers; later values win."""
        self._headers.update(headers)
        return self

    def header(self, key: str, value: str) -> "RequestBuilder[T]":
        self._headers[key] = value
        return self

    def params(self, params: QueryParamTypes) -> "RequestBuilder[T]":
        """Replace every query parameter with ``params``."""
        self._params = to_query_pairs(params)
        return self

    def param(self, key: str, value: Any) -> "RequestBuilder[T]":
        """Append a query parameter; repeated keys are kept."""
        self._params.extend(to_query_pairs([(key, value)]))
        return self

    def body(self, item: Any) -> "RequestBuilder[T]":
        """Body sent as JSON; ``None``, ``False``, ``0`` and ``""`` send nothing."""
        self._body = item
        return self

    def retrieve(self) -> ResponseResolver[T]:
        """Dispatch the request and return its resolver without waiting."""
        retriever = RequestRetriever(self._handler, self._transport)
        return retriever.retrieve(self)

    def get_base_uri(self) -> str:
        return self._base_uri

    def get_uri(self) -> str:
        return self._uri

    def get_default_headers(self) -> httpx.Headers:
        return self._default_headers

    def get_method(self) -> HttpMethod:
        return self._method

    def get_timeout(self) -> int | None:
        return self._timeout

    def get_headers(self) -> httpx.Headers:
        return self._headers

    def get_params(self) -> QueryPairs:
        return self._params

    def get_body(self) -> Any:
        return self._body
