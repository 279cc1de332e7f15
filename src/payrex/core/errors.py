"""
Error taxonomy for the PayRex client.

Every failure surfaced by the library is an instance of exactly one
:class:`PayrexError` subclass. The retry controller consults
:func:`payrex.core.retry.is_retryable` to decide which of them are worth
another attempt.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

__all__ = [
    "ApiError",
    "AuthenticationError",
    "ConfigError",
    "ErrorKind",
    "IdempotencyError",
    "InternalError",
    "InvalidApiKeyError",
    "InvalidRequestError",
    "JsonError",
    "NotFoundError",
    "PayrexError",
    "PermissionDeniedError",
    "RateLimitError",
    "RequestCancelledError",
    "RequestTimeoutError",
    "TransportError",
]


class ErrorKind(str, Enum):
    """Category of an error reported by the API."""

    INVALID_REQUEST = "invalid_request"
    AUTHENTICATION = "authentication_error"
    RATE_LIMIT = "rate_limit"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    IDEMPOTENCY = "idempotency_error"
    SERVER_ERROR = "server_error"
    UNKNOWN = "unknown_error"

    @classmethod
    def from_str(cls, value: str) -> "ErrorKind":
        return _KIND_ALIASES.get(value, cls.UNKNOWN)

    @classmethod
    def from_status(cls, status_code: int) -> "ErrorKind":
        if status_code == 400:
            return cls.INVALID_REQUEST
        if status_code == 401:
            return cls.AUTHENTICATION
        if status_code == 403:
            return cls.PERMISSION_DENIED
        if status_code == 404:
            return cls.NOT_FOUND
        if status_code == 409:
            return cls.IDEMPOTENCY
        if status_code == 429:
            return cls.RATE_LIMIT
        if 500 <= status_code < 600:
            return cls.SERVER_ERROR
        return cls.UNKNOWN

    @property
    def is_retryable(self) -> bool:
        return self in (ErrorKind.RATE_LIMIT, ErrorKind.SERVER_ERROR)

    def __str__(self) -> str:
        return self.value


_KIND_ALIASES = {
    "invalid_request": ErrorKind.INVALID_REQUEST,
    "invalid_request_error": ErrorKind.INVALID_REQUEST,
    "authentication": ErrorKind.AUTHENTICATION,
    "authentication_error": ErrorKind.AUTHENTICATION,
    "rate_limit": ErrorKind.RATE_LIMIT,
    "rate_limit_error": ErrorKind.RATE_LIMIT,
    "not_found": ErrorKind.NOT_FOUND,
    "resource_not_found": ErrorKind.NOT_FOUND,
    "permission_denied": ErrorKind.PERMISSION_DENIED,
    "forbidden": ErrorKind.PERMISSION_DENIED,
    "idempotency": ErrorKind.IDEMPOTENCY,
    "idempotency_error": ErrorKind.IDEMPOTENCY,
    "server_error": ErrorKind.SERVER_ERROR,
    "internal_server_error": ErrorKind.SERVER_ERROR,
}


class PayrexError(Exception):
    """Base class for every error raised by the client."""


class TransportError(PayrexError):
    """The HTTP exchange did not complete (DNS, refused connection, ...)."""

    def __init__(self, message: str, *, connect: bool = False) -> None:
        super().__init__(f"HTTP request failed: {message}")
        self.connect = connect


class ApiError(PayrexError):
    """The API answered with a non-success status."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        status_code: Optional[int] = None,
        request_id: Optional[str] = None,
    ) -> None:
        super().__init__(f"API error: {kind} - {message}")
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.request_id = request_id


class JsonError(PayrexError):
    """A request body could not be encoded or a response body decoded."""

    def __init__(self, message: str) -> None:
        super().__init__(f"JSON error: {message}")


class ConfigError(PayrexError):
    """Raised when the supplied configuration is invalid."""


class InvalidApiKeyError(PayrexError):
    """The secret key is missing or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid API key: {message}")


class RateLimitError(PayrexError):
    """The API throttled the request (HTTP 429)."""

    def __init__(
        self,
        retry_after: Optional[int] = None,
        *,
        request_id: Optional[str] = None,
    ) -> None:
        super().__init__(f"Rate limit exceeded. Retry after: {retry_after}")
        self.retry_after = retry_after
        self.request_id = request_id


class RequestTimeoutError(PayrexError):
    """The client-side timeout elapsed before the API answered."""

    def __init__(self, timeout: float) -> None:
        super().__init__(f"Request timed out after {timeout}s")
        self.timeout = timeout


class RequestCancelledError(PayrexError):
    """The caller cancelled the call or its deadline passed before an attempt."""


class InvalidRequestError(PayrexError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid request: {message}")


class NotFoundError(PayrexError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Resource not found: {message}")


class AuthenticationError(PayrexError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Authentication failed: {message}")


class PermissionDeniedError(PayrexError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Permission denied: {message}")


class IdempotencyError(PayrexError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Idempotency error: {message}")


class InternalError(PayrexError):
    def __init__(self, message: str) -> None:
        super().__init__(f"Internal error: {message}")
