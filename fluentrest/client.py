"""RestClient and its builder."""

from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from .config import DEFAULT_TIMEOUT_MS, ClientConfig
from .models import HttpMethod, ResponseHandler
from .request import RequestBuilder
from .transport import HttpxTransport, Transport

logger = structlog.get_logger()

JSON_HEADERS = {"Content-Type": "application/json"}


class ClientBuilder:
    """Collects the shared defaults of a RestClient."""

    def __init__(self) -> None:
        self._base_url: str | None = None
        self._headers: Mapping[str, str] | None = None
        self._timeout: int | None = DEFAULT_TIMEOUT_MS
        self._handler: ResponseHandler | None = None
        self._transport: Transport | None = None

    def base_url(self, url: str) -> "ClientBuilder":
        self._base_url = url
        return self

    def default_headers(self, headers: Mapping[str, str]) -> "ClientBuilder":
        self._headers = headers
        return self

    def timeout(self, timeout: int | None = DEFAULT_TIMEOUT_MS) -> "ClientBuilder":
        """Default request timeout in milliseconds; None disables it."""
        self._timeout = timeout
        return self

    def handler(self, handler: ResponseHandler) -> "ClientBuilder":
        """Inspector called with every raw response before it is resolved."""
        self._handler = handler
        return self

    def transport(self, transport: Transport) -> "ClientBuilder":
        self._transport = transport
        return self

    def build(self) -> "RestClient":
        """
        Freeze the collected settings into a RestClient.

        Raises:
            ValueError: If the timeout is not greater than 0
        """
        return RestClient(
            ClientConfig(
                base_url=self._base_url,
                default_headers=self._headers,
                timeout_ms=self._timeout,
                handler=self._handler,
                transport=self._transport,
            )
        )


class RestClient:
    """
    Entry point producing one RequestBuilder per HTTP verb.

    The client holds only its immutable ClientConfig, so a single instance
    can issue any number of concurrent requests.

    Example:
        ```python
        from fluentrest import RestClient

        client = (
            RestClient.builder()
            .base_url("https://api.example.com")
            .default_headers({"Authorization": "Bearer token"})
            .timeout(5000)
            .build()
        )

        entity = await client.get().uri("/users/1").retrieve().to_entity()
        print(entity.status, entity.data)

        await client.post().uri("/users").body({"name": "Ada"}).retrieve().to_void()
        ```
    """

    def __init__(self, config: ClientConfig | None = None) -> None:
        """
        Initialize RestClient.

        Args:
            config: Client configuration. If None, uses default config.
        """
        self.config = config or ClientConfig()
        self._transport = self.config.transport or HttpxTransport()
        logger.debug(
            "RestClient initialized",
            base_url=self.config.base_url,
            timeout_ms=self.config.timeout_ms,
        )

    @staticmethod
    def builder() -> ClientBuilder:
        return ClientBuilder()

    @staticmethod
    def create() -> ClientBuilder:
        """Alias of :meth:`builder`."""
        return ClientBuilder()

    @classmethod
    def from_config(cls, config: ClientConfig) -> "RestClient":
        return cls(config)

    def _request(self, method: HttpMethod, verb_headers: Mapping[str, str]) -> RequestBuilder[Any]:
        headers = httpx.Headers(verb_headers)
        headers.update(self.config.default_headers or {})
        return RequestBuilder(
            method=method,
            base_uri=self.config.base_url,
            headers=headers,
            timeout=self.config.timeout_ms,
            handler=self.config.handler,
            transport=self._transport,
        )

    def get(self) -> RequestBuilder[Any]:
        return self._request(HttpMethod.GET, {})

    def post(self) -> RequestBuilder[Any]:
        return self._request(HttpMethod.POST, JSON_HEADERS)

    def put(self) -> RequestBuilder[Any]:
        return self._request(HttpMethod.PUT, JSON_HEADERS)

    def patch(self) -> RequestBuilder[Any]:
        return self._request(HttpMethod.PATCH, JSON_HEADERS)

    def delete(self) -> RequestBuilder[Any]:
        return self._request(HttpMethod.DELETE, {})
