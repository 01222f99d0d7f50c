"""Data models for fluentrest."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Generic, TypeVar

import httpx

if TYPE_CHECKING:
    from .transport import FetchResponse

T = TypeVar("T")


class HttpMethod(str, Enum):
    """Supported HTTP verbs."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ResponseType(str, Enum):
    """Response type tags of a fetch-style response."""

    basic = "basic"
    cors = "cors"
    default = "default"
    error = "error"
    opaque = "opaque"
    opaqueredirect = "opaqueredirect"


ResponseHandler = Callable[["FetchResponse"], Awaitable[None] | None]
ResponseConverter = Callable[[Any], T]


@dataclass(frozen=True)
class VoidEntity:
    """Response metadata without a payload."""

    status: int
    headers: httpx.Headers
    type: ResponseType
    status_text: str
    is_redirected: bool

    @classmethod
    def create(cls, response: "FetchResponse") -> "VoidEntity":
        return cls(
            status=response.status,
            headers=response.headers,
            type=response.type,
            status_text=response.status_text,
            is_redirected=response.redirected,
        )


@dataclass(frozen=True)
class Entity(VoidEntity, Generic[T]):
    """
    Response metadata plus the decoded payload.

    ``data`` is whatever the decoding step produced. It is not checked
    against ``T``: a plain-text body lands in ``data`` as a ``str`` even when
    the caller asked for a structured type.
    """

    data: T

    @classmethod
    def create(cls, response: "FetchResponse", data: Any = None) -> "Entity[Any]":
        return cls(
            status=response.status,
            headers=response.headers,
            type=response.type,
            status_text=response.status_text,
            is_redirected=response.redirected,
            data=data,
        )
