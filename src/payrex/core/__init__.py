"""
Core primitives that implement the PayRex request lifecycle.
"""

from .client import HttpClient, RequestDescriptor
from .config import (
    API_BASE_URL,
    VERSION,
    ClientConfig,
    ClientParameters,
    load_client_config,
)
from .encoding import FormPairs, flatten_form, to_wire
from .environment import ClientEnvironment, build_environment, parse_env_file
from .errors import (
    ApiError,
    AuthenticationError,
    ConfigError,
    ErrorKind,
    IdempotencyError,
    InternalError,
    InvalidApiKeyError,
    InvalidRequestError,
    JsonError,
    NotFoundError,
    PayrexError,
    PermissionDeniedError,
    RateLimitError,
    RequestCancelledError,
    RequestTimeoutError,
    TransportError,
)
from .responses import error_payload, handle_response
from .retry import RetryController, is_retryable, retry_delay
from .transport import Transport, build_url

__all__ = [
    "API_BASE_URL",
    "VERSION",
    "ApiError",
    "AuthenticationError",
    "ClientConfig",
    "ClientEnvironment",
    "ClientParameters",
    "ConfigError",
    "ErrorKind",
    "FormPairs",
    "HttpClient",
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
    "RequestDescriptor",
    "RequestTimeoutError",
    "RetryController",
    "Transport",
    "TransportError",
    "build_environment",
    "build_url",
    "error_payload",
    "flatten_form",
    "handle_response",
    "is_retryable",
    "load_client_config",
    "parse_env_file",
    "retry_delay",
    "to_wire",
]
