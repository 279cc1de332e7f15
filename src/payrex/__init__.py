"""
Public facade for the PayRex client package.

The module re-exports the most useful pieces for integrators so they can
``from payrex import ...`` without navigating the package.
"""

from .api import create_client
from .client import PayrexClient
from .core import (
    API_BASE_URL,
    VERSION,
    ApiError,
    AuthenticationError,
    ClientConfig,
    ClientEnvironment,
    ClientParameters,
    ConfigError,
    ErrorKind,
    HttpClient,
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
    RequestDescriptor,
    RequestTimeoutError,
    TransportError,
    build_environment,
    load_client_config,
)
from .core.types import (
    BillingStatementId,
    BillingStatementLineItemId,
    CaptureMethod,
    CardOptions,
    CheckoutSessionId,
    Currency,
    CustomerId,
    Deleted,
    EventId,
    EventType,
    List,
    ListParams,
    Metadata,
    PaymentId,
    PaymentIntentId,
    PaymentMethod,
    PaymentMethodOptions,
    PayoutId,
    PayoutTransactionId,
    RefundId,
    WebhookId,
)

__version__ = VERSION

__all__ = (
    "API_BASE_URL",
    "ApiError",
    "AuthenticationError",
    "BillingStatementId",
    "BillingStatementLineItemId",
    "CaptureMethod",
    "CardOptions",
    "CheckoutSessionId",
    "ClientConfig",
    "ClientEnvironment",
    "ClientParameters",
    "ConfigError",
    "Currency",
    "CustomerId",
    "Deleted",
    "ErrorKind",
    "EventId",
    "EventType",
    "HttpClient",
    "IdempotencyError",
    "InternalError",
    "InvalidApiKeyError",
    "InvalidRequestError",
    "JsonError",
    "List",
    "ListParams",
    "Metadata",
    "NotFoundError",
    "PaymentId",
    "PaymentIntentId",
    "PaymentMethod",
    "PaymentMethodOptions",
    "PayoutId",
    "PayoutTransactionId",
    "PayrexClient",
    "PayrexError",
    "PermissionDeniedError",
    "RateLimitError",
    "RefundId",
    "RequestCancelledError",
    "RequestDescriptor",
    "RequestTimeoutError",
    "TransportError",
    "VERSION",
    "WebhookId",
    "__version__",
    "build_environment",
    "create_client",
    "load_client_config",
)
