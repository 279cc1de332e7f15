"""
Payment intents: the record of a customer's intention to pay an amount.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from ..core.types import (
    CaptureMethod,
    Currency,
    Metadata,
    PaymentIntentId,
    PaymentMethod,
    PaymentMethodOptions,
    from_unix,
    optional_timestamp,
)
from .base import Creatable, Retrievable

__all__ = [
    "CapturePaymentIntent",
    "CreatePaymentIntent",
    "NextAction",
    "PaymentError",
    "PaymentIntent",
    "PaymentIntentStatus",
    "PaymentIntents",
]


class PaymentIntentStatus(str, Enum):
    AWAITING_PAYMENT_METHOD = "awaiting_payment_method"
    REQUIRES_PAYMENT_METHOD = "requires_payment_method"
    REQUIRES_CONFIRMATION = "requires_confirmation"
    REQUIRES_ACTION = "requires_action"
    PROCESSING = "processing"
    REQUIRES_CAPTURE = "requires_capture"
    CANCELLED = "cancelled"
    SUCCEEDED = "succeeded"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NextAction:
    action_type: str
    redirect_url: Optional[str] = None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "NextAction":
        return cls(
            action_type=payload["type"],
            redirect_url=payload.get("redirect_url"),
        )


@dataclass(frozen=True)
class PaymentError:
    code: Optional[str] = None
    message: Optional[str] = None
    param: Optional[str] = None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "PaymentError":
        return cls(
            code=payload.get("code"),
            message=payload.get("message"),
            param=payload.get("param"),
        )


@dataclass(frozen=True)
class PaymentIntent:
    id: PaymentIntentId
    amount: int
    amount_received: int
    amount_capturable: int
    client_secret: str
    currency: Currency
    livemode: bool
    payment_methods: Tuple[str, ...]
    statement_descriptor: str
    status: PaymentIntentStatus
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    metadata: Optional[Metadata] = None
    latest_payment: Optional[str] = None
    last_payment_error: Optional[PaymentError] = None
    payment_method_id: Optional[str] = None
    payment_method_options: Optional[PaymentMethodOptions] = None
    next_action: Optional[NextAction] = None
    return_url: Optional[str] = None
    capture_before_at: Optional[datetime] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "PaymentIntent":
        metadata = payload.get("metadata")
        error = payload.get("last_payment_error")
        options = payload.get("payment_method_options")
        next_action = payload.get("next_action")
        return cls(
            id=PaymentIntentId.unchecked(payload["id"]),
            amount=payload["amount"],
            amount_received=payload["amount_received"],
            amount_capturable=payload["amount_capturable"],
            client_secret=payload["client_secret"],
            currency=Currency(payload["currency"]),
            livemode=payload["livemode"],
            payment_methods=tuple(payload["payment_methods"]),
            statement_descriptor=payload["statement_descriptor"],
            status=PaymentIntentStatus(payload["status"]),
            created_at=from_unix(payload["created_at"]),
            updated_at=from_unix(payload["updated_at"]),
            description=payload.get("description"),
            metadata=Metadata(metadata) if metadata is not None else None,
            latest_payment=payload.get("latest_payment"),
            last_payment_error=PaymentError.from_response(error) if error else None,
            payment_method_id=payload.get("payment_method_id"),
            payment_method_options=(
                PaymentMethodOptions.from_response(options) if options else None
            ),
            next_action=NextAction.from_response(next_action) if next_action else None,
            return_url=payload.get("return_url"),
            capture_before_at=optional_timestamp(payload.get("capture_before_at")),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class CreatePaymentIntent:
    """Parameters for creating a payment intent; ``amount`` is in centavos."""

    amount: int
    currency: Currency
    payment_methods: Sequence[PaymentMethod]
    description: Optional[str] = None
    metadata: Optional[Metadata] = None
    capture_method: Optional[CaptureMethod] = None
    payment_method_options: Optional[PaymentMethodOptions] = None
    statement_descriptor: Optional[str] = None
    return_url: Optional[str] = None


@dataclass(frozen=True)
class CapturePaymentIntent:
    amount: int


class PaymentIntents(Creatable, Retrievable):
    path = "/payment_intents"
    model = PaymentIntent
    id_type = PaymentIntentId

    def cancel(self, resource_id: str) -> PaymentIntent:
        return self._action(resource_id, "cancel")

    def capture(self, resource_id: str, params: CapturePaymentIntent) -> PaymentIntent:
        return self._action(resource_id, "capture", params)
