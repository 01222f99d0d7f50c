"""URI assembly and body serialization helpers."""

import math
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import parse_qsl, urlencode

import httpx
import pydantic_core

QueryPairs = list[tuple[str, str]]
QueryParamTypes = httpx.QueryParams | Mapping[str, Any] | Sequence[tuple[str, Any]] | str


def to_query_pairs(params: QueryParamTypes) -> QueryPairs:
    """Flatten ``params`` into ordered ``(key, value)`` string pairs.

    Pair sequences and query strings keep their exact order. Mappings and
    ``httpx.QueryParams`` go through ``httpx.QueryParams``, which groups
    repeated keys and stringifies values the same way httpx does for a request.
    """
    if isinstance(params, str):
        return parse_qsl(params.lstrip("?"), keep_blank_values=True)
    if isinstance(params, (list, tuple)):
        return [
            pair for key, value in params for pair in httpx.QueryParams({key: value}).multi_items()
        ]
    return httpx.QueryParams(params).multi_items()


def create_uri(
    uri: str | None,
    base_uri: str | None = None,
    params: Sequence[tuple[str, str]] | None = None,
) -> str:
    """
    Join ``base_uri`` and ``uri`` and append the query string.

    The base and path are concatenated verbatim; duplicate or missing slashes
    are left to the caller. ``?`` is only appended for a non-empty parameter
    set, whose pairs keep insertion order and repeated keys.

    Example:
        ```python
        create_uri("/users/1", "https://api.example.com", [("key", "value")])
        # "https://api.example.com/users/1?key=value"
        ```
    """
    url = f"{base_uri}{uri or ''}" if base_uri else uri or ""
    if params:
        return f"{url}?{urlencode(params)}"
    return url


def has_body(value: Any) -> bool:
    """Whether ``value`` should be sent as a request body.

    ``None``, ``False``, zero, NaN and the empty string carry no body. Containers
    are bodies even when empty, so ``{}`` and ``[]`` are still sent.
    """
    if value is None:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, (str, bytes, bool, int, float)):
        return bool(value)
    return True


def serialize_body(value: Any) -> str | None:
    """Serialize ``value`` to compact JSON text, or None when there is no body.

    Pydantic models, dataclasses, datetimes and UUIDs are converted the way
    pydantic serializes them in JSON mode. NaN and infinities become ``null``.

    Raises:
        pydantic_core.PydanticSerializationError: If ``value`` is not JSON serializable.
    """
    if not has_body(value):
        return None
    return pydantic_core.to_json(value, inf_nan_mode="null").decode("utf-8")
