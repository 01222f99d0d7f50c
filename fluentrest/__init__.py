"""fluentrest - fluent async HTTP requests

Composes base URL, headers, query parameters, timeout and body with a
builder API, dispatches through a fetch-style transport and resolves the
response into a decoded entity, a status-only entity or the raw response.

Example:
    ```python
    from fluentrest import RestClient, raise_for_status

    client = (
        RestClient.builder()
        .base_url("https://api.example.com")
        .default_headers({"Authorization": "Bearer token"})
        .timeout(5000)
        .handler(raise_for_status)
        .build()
    )

    # Decoded entity
    entity = await client.get().uri("/users").param("page", "2").retrieve().to_entity()
    print(entity.status, entity.data)

    # Status only
    result = await client.delete().uri("/users/1").retrieve().to_void()
    ```
"""

from .client import ClientBuilder, RestClient
from .config import DEFAULT_TIMEOUT_MS, ClientConfig
from .exceptions import (
    AuthenticationError,
    BodyConsumedError,
    FluentRestError,
    HttpStatusError,
    PermissionDeniedError,
    RateLimitError,
    RequestAbortedError,
    RequestTimeoutError,
    ResourceNotFoundError,
    ServiceUnavailableError,
    ValidationError,
)
from .hooks import raise_for_status, typed
from .models import (
    Entity,
    HttpMethod,
    ResponseConverter,
    ResponseHandler,
    ResponseType,
    VoidEntity,
)
from .request import RequestBuilder
from .resolver import ResponseResolver
from .retriever import RequestRetriever
from .transport import (
    AbortController,
    AbortSignal,
    FetchOptions,
    FetchResponse,
    HttpxTransport,
    Transport,
)
from .utils import create_uri
from .version import __version__

__all__ = [
    # Version
    "__version__",
    # Client
    "RestClient",
    "ClientBuilder",
    "ClientConfig",
    "DEFAULT_TIMEOUT_MS",
    # Pipeline
    "RequestBuilder",
    "RequestRetriever",
    "ResponseResolver",
    "create_uri",
    # Transport
    "Transport",
    "HttpxTransport",
    "FetchOptions",
    "FetchResponse",
    "AbortController",
    "AbortSignal",
    # Models
    "Entity",
    "VoidEntity",
    "HttpMethod",
    "ResponseType",
    "ResponseHandler",
    "ResponseConverter",
    # Hooks
    "raise_for_status",
    "typed",
    # Exceptions
    "FluentRestError",
    "RequestAbortedError",
    "RequestTimeoutError",
    "BodyConsumedError",
    "HttpStatusError",
    "AuthenticationError",
    "PermissionDeniedError",
    "ResourceNotFoundError",
    "ValidationError",
    "RateLimitError",
    "ServiceUnavailableError",
]
