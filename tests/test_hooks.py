"""Tests for the ready-made inspectors and converters."""

import httpx
import pydantic
import pytest
from pydantic import BaseModel

from conftest import json_response
from fluentrest import (
    AuthenticationError,
    FetchResponse,
    HttpStatusError,
    PermissionDeniedError,
    RateLimitError,
    ResourceNotFoundError,
    ServiceUnavailableError,
    ValidationError,
    raise_for_status,
    typed,
)
from fluentrest.resolver import ResponseResolver
from fluentrest.retriever import PendingResponse


class User(BaseModel):
    id: str
    email: str


class TestRaiseForStatus:
    """Tests for raise_for_status."""

    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_success_passes(self, status):
        """2xx responses are accepted."""
        assert raise_for_status(FetchResponse(status)) is None

    @pytest.mark.parametrize(
        "status, error",
        [
            (400, ValidationError),
            (401, AuthenticationError),
            (403, PermissionDeniedError),
            (404, ResourceNotFoundError),
            (422, ValidationError),
            (429, RateLimitError),
            (503, ServiceUnavailableError),
            (500, HttpStatusError),
            (302, HttpStatusError),
        ],
    )
    def test_error_mapping(self, status, error):
        """Each status maps to its exception."""
        response = FetchResponse(status, status_text="Reason")
        with pytest.raises(error) as exc_info:
            raise_for_status(response)

        assert exc_info.value.status_code == status
        assert exc_info.value.message == f"{status} Reason"
        assert exc_info.value.response is response

    def test_rate_limit_retry_after(self):
        """Retry-After seconds are exposed on RateLimitError."""
        response = FetchResponse(429, headers=httpx.Headers({"Retry-After": "30"}))
        with pytest.raises(RateLimitError) as exc_info:
            raise_for_status(response)
        assert exc_info.value.retry_after_seconds == 30

    def test_rate_limit_retry_after_http_date(self):
        """Non-numeric Retry-After values fall back to 0."""
        response = FetchResponse(
            429, headers=httpx.Headers({"Retry-After": "Wed, 21 Oct 2026 07:28:00 GMT"})
        )
        with pytest.raises(RateLimitError) as exc_info:
            raise_for_status(response)
        assert exc_info.value.retry_after_seconds == 0

    def test_body_left_unread(self):
        """The inspector never consumes the body."""
        response = json_response('{"detail":"nope"}', status=401)
        with pytest.raises(AuthenticationError):
            raise_for_status(response)
        assert response.body_used is False


class TestTyped:
    """Tests for the typed() converter."""

    def test_model(self):
        """Payloads validate into pydantic models."""
        user = typed(User)({"id": "user-1", "email": "ada@example.com"})
        assert user == User(id="user-1", email="ada@example.com")

    def test_generic_container(self):
        """Container types are supported."""
        users = typed(list[User])([{"id": "1", "email": "a@x"}, {"id": "2", "email": "b@x"}])
        assert [u.id for u in users] == ["1", "2"]

    def test_invalid_payload(self):
        """Mismatched payloads raise pydantic.ValidationError."""
        with pytest.raises(pydantic.ValidationError):
            typed(User)({"id": "user-1"})

    @pytest.mark.asyncio
    async def test_as_resolver_converter(self):
        """typed() plugs into ResponseResolver.converter."""

        async def pending():
            return json_response('{"id":"user-1","email":"ada@example.com"}')

        entity = await (
            ResponseResolver(PendingResponse(pending())).converter(typed(User)).to_entity()
        )
        assert entity.data.email == "ada@example.com"
