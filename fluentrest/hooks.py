"""Ready-made inspectors and converters.

Nothing here is applied by default. Attach them explicitly:

```python
client = RestClient.builder().handler(raise_for_status).build()

users = await (
    client.get()
    .uri("/users")
    .retrieve()
    .converter(typed(list[User]))
    .to_entity()
)
```
"""

from typing import Any, Callable, TypeVar

from pydantic import TypeAdapter

from .exceptions import (
    AuthenticationError,
    HttpStatusError,
    PermissionDeniedError,
    RateLimitError,
    ResourceNotFoundError,
    ServiceUnavailableError,
    ValidationError,
)
from .transport import FetchResponse

T = TypeVar("T")


def _retry_after(response: FetchResponse) -> int:
    value = response.headers.get("Retry-After", "")
    return int(value) if value.isdigit() else 0


def raise_for_status(response: FetchResponse) -> None:
    """
    Reject non-2xx responses.

    The body is left unread so the terminal projection can still decode it;
    the message is the status line.

    Raises:
        ValidationError: For 400 and 422 responses
        AuthenticationError: For 401 responses
        PermissionDeniedError: For 403 responses
        ResourceNotFoundError: For 404 responses
        RateLimitError: For 429 responses
        ServiceUnavailableError: For 503 responses
        HttpStatusError: For any other non-2xx response
    """
    status_code = response.status
    if 200 <= status_code < 300:
        return

    message = f"{status_code} {response.status_text}".strip()

    if status_code in (400, 422):
        raise ValidationError(message, status_code=status_code, response=response)
    elif status_code == 401:
        raise AuthenticationError(message, response=response)
    elif status_code == 403:
        raise PermissionDeniedError(message, response=response)
    elif status_code == 404:
        raise ResourceNotFoundError(message, response=response)
    elif status_code == 429:
        raise RateLimitError(
            message, retry_after_seconds=_retry_after(response), response=response
        )
    elif status_code == 503:
        raise ServiceUnavailableError(message, response=response)
    else:
        raise HttpStatusError(message, status_code=status_code, response=response)


def typed(tp: type[T] | Any) -> Callable[[Any], T]:
    """Converter validating decoded JSON into ``tp`` with pydantic.

    Raises:
        pydantic.ValidationError: If the payload does not match ``tp``.
    """
    adapter: TypeAdapter[T] = TypeAdapter(tp)
    return adapter.validate_python
