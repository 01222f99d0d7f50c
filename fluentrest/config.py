"""Configuration for fluentrest clients."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ResponseHandler
    from .transport import Transport

DEFAULT_TIMEOUT_MS = 10000


def validate_timeout(timeout_ms: int | None) -> None:
    """Reject non-positive timeouts; ``None`` disables the timeout."""
    if timeout_ms is not None and timeout_ms <= 0:
        raise ValueError("timeout_ms must be greater than 0")


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration shared by every request of a RestClient.

    Attributes:
        base_url: Prefix joined verbatim with each request path (default: None)
        default_headers: Headers sent with every request (default: None)
        timeout_ms: Request timeout in milliseconds, None to disable (default: 10000)
        handler: Inspector called with every raw response (default: None)
        transport: Fetch-style transport, HttpxTransport when None (default: None)

    Example:
        ```python
        config = ClientConfig(
            base_url="https://api.example.com",
            default_headers={"Authorization": "Bearer token"},
            timeout_ms=5000,
        )
        client = RestClient.from_config(config)
        ```
    """

    base_url: str | None = None
    default_headers: Mapping[str, str] | None = None
    timeout_ms: int | None = DEFAULT_TIMEOUT_MS
    handler: "ResponseHandler | None" = None
    transport: "Transport | None" = None

    # default_headers is a mappingproxy, so configs cannot be hashed
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        validate_timeout(self.timeout_ms)

        # Read-only copy, detached from the caller's mapping
        if self.default_headers is not None:
            object.__setattr__(
                self, "default_headers", MappingProxyType(dict(self.default_headers))
            )
