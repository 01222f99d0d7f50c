"""Exceptions for fluentrest."""

from typing import Any


class FluentRestError(Exception):
    """Base exception for all fluentrest errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """
        Initialize FluentRestError.

        Args:
            message: Error message
            status_code: HTTP status code if applicable
        """
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class RequestAbortedError(FluentRestError):
    """Raised by a transport when the request's abort signal fires."""

    def __init__(self, message: str = "Request aborted", reason: Any = None) -> None:
        """Initialize RequestAbortedError."""
        self.reason = reason
        super().__init__(message)


class RequestTimeoutError(RequestAbortedError):
    """Raised when a request does not settle within its timeout."""

    def __init__(self, timeout_ms: int) -> None:
        """Initialize RequestTimeoutError."""
        self.timeout_ms = timeout_ms
        super().__init__(f"Request timed out after {timeout_ms} ms", reason="timeout")


class BodyConsumedError(FluentRestError):
    """Raised when a response body is read a second time."""

    def __init__(self, message: str = "Response body already consumed") -> None:
        """Initialize BodyConsumedError."""
        super().__init__(message)


class HttpStatusError(FluentRestError):
    """Raised by the status inspector for an unacceptable response status."""

    def __init__(self, message: str, status_code: int, response: Any = None) -> None:
        """
        Initialize HttpStatusError.

        Args:
            message: Error message
            status_code: HTTP status code of the response
            response: The raw response that was rejected
        """
        self.response = response
        super().__init__(message, status_code=status_code)


class AuthenticationError(HttpStatusError):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication failed", response: Any = None) -> None:
        """Initialize AuthenticationError."""
        super().__init__(message, status_code=401, response=response)


class PermissionDeniedError(HttpStatusError):
    """Raised when the caller lacks required permissions."""

    def __init__(self, message: str = "Permission denied", response: Any = None) -> None:
        """Initialize PermissionDeniedError."""
        super().__init__(message, status_code=403, response=response)


class ResourceNotFoundError(HttpStatusError):
    """Raised when requested resource is not found."""

    def __init__(self, message: str = "Resource not found", response: Any = None) -> None:
        """Initialize ResourceNotFoundError."""
        super().__init__(message, status_code=404, response=response)


class ValidationError(HttpStatusError):
    """Raised when request validation fails."""

    def __init__(
        self,
        message: str = "Validation failed",
        status_code: int = 422,
        response: Any = None,
    ) -> None:
        """Initialize ValidationError."""
        super().__init__(message, status_code=status_code, response=response)


class RateLimitError(HttpStatusError):
    """Raised when rate limit is exceeded."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after_seconds: int = 0,
        response: Any = None,
    ) -> None:
        """Initialize RateLimitError."""
        self.retry_after_seconds = retry_after_seconds
        super().__init__(message, status_code=429, response=response)


class ServiceUnavailableError(HttpStatusError):
    """Raised when the remote service is unavailable."""

    def __init__(self, message: str = "Service unavailable", response: Any = None) -> None:
        """Initialize ServiceUnavailableError."""
        super().__init__(message, status_code=503, response=response)
