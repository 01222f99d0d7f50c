"""Response projections: entity, void, or raw response."""

import inspect
from collections.abc import Awaitable
from typing import Any, Generic, TypeVar

import structlog

from .models import Entity, ResponseConverter, ResponseHandler, VoidEntity
from .transport import FetchResponse

T = TypeVar("T")

logger = structlog.get_logger()

JSON_CONTENT_TYPE = "application/json"


class ResponseResolver(Generic[T]):
    """
    Resolves a pending response into one of three projections.

    Each terminal coroutine awaits the same pending response and runs the
    inspector again, so a handler with side effects runs once per terminal
    call. Status codes are never validated here; a 404 resolves like a 200
    unless the handler raises.

    Example:
        ```python
        entity = await (
            client.get()
            .uri("/users/1")
            .retrieve()
            .handler(raise_for_status)
            .converter(User.model_validate)
            .to_entity()
        )
        ```
    """

    def __init__(
        self,
        response: Awaitable[FetchResponse],
        handler: ResponseHandler | None = None,
    ) -> None:
        self._response = response
        self._handler = handler
        self._converter: ResponseConverter[T] | None = None

    def converter(self, converter: ResponseConverter[T]) -> "ResponseResolver[T]":
        """Transform decoded JSON before it is assigned to ``Entity.data``."""
        self._converter = converter
        return self

    def handler(self, handler: ResponseHandler) -> "ResponseResolver[T]":
        """Inspect the raw response of this request, replacing the client handler."""
        self._handler = handler
        return self

    async def _inspect(self) -> FetchResponse:
        response = await self._response
        if self._handler is not None:
            result = self._handler(response)
            if inspect.isawaitable(result):
                await result
        return response

    async def to_entity(self) -> Entity[T]:
        """Decode the body by content type and wrap it with the response metadata.

        JSON bodies are parsed (and converted when a converter is set). Any
        other body is read as text and assigned to ``data`` unchanged.

        Raises:
            json.JSONDecodeError: If a JSON content type carries an invalid body.
        """
        response = await self._inspect()

        content_type = response.headers.get("Content-Type")
        data: Any
        if content_type and JSON_CONTENT_TYPE in content_type:
            data = await response.json()
            if self._converter is not None:
                data = self._converter(data)
        else:
            data = await response.text()

        logger.debug("Response decoded", status=response.status, content_type=content_type)
        return Entity.create(response, data)

    async def to_void(self) -> VoidEntity:
        """Return the response metadata without reading the body."""
        response = await self._inspect()
        return VoidEntity.create(response)

    async def to_response(self) -> FetchResponse:
        """Return the raw response untouched."""
        return await self._inspect()
