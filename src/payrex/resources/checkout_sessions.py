"""
Checkout sessions: hosted payment pages for a fixed set of line items.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from ..core.types import (
    CheckoutSessionId,
    Currency,
    Metadata,
    PaymentMethod,
    PaymentMethodOptions,
    from_unix,
    optional_timestamp,
)
from .base import Creatable, Retrievable
from .payment_intents import PaymentIntent

__all__ = [
    "CheckoutSession",
    "CheckoutSessionLineItem",
    "CheckoutSessionStatus",
    "CheckoutSessions",
    "CreateCheckoutSession",
]


class CheckoutSessionStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    EXPIRED = "expired"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CheckoutSessionLineItem:
    name: str
    amount: int
    quantity: int
    id: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "CheckoutSessionLineItem":
        return cls(
            name=payload["name"],
            amount=payload["amount"],
            quantity=payload["quantity"],
            id=payload.get("id"),
            description=payload.get("description"),
            image=payload.get("image"),
        )


@dataclass(frozen=True)
class CheckoutSession:
    id: CheckoutSessionId
    status: CheckoutSessionStatus
    currency: Currency
    line_items: Tuple[CheckoutSessionLineItem, ...]
    livemode: bool
    url: str
    created_at: datetime
    updated_at: datetime
    amount: Optional[int] = None
    customer_reference_id: Optional[str] = None
    billing_details_collection: Optional[str] = None
    client_secret: Optional[str] = None
    payment_intent: Optional[PaymentIntent] = None
    metadata: Optional[Metadata] = None
    success_url: Optional[str] = None
    cancel_url: Optional[str] = None
    payment_methods: Optional[Tuple[PaymentMethod, ...]] = None
    payment_method_options: Optional[PaymentMethodOptions] = None
    description: Optional[str] = None
    submit_type: Optional[str] = None
    statement_descriptor: Optional[str] = None
    expires_at: Optional[datetime] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "CheckoutSession":
        intent = payload.get("payment_intent")
        metadata = payload.get("metadata")
        methods = payload.get("payment_methods")
        options = payload.get("payment_method_options")
        return cls(
            id=CheckoutSessionId.unchecked(payload["id"]),
            status=CheckoutSessionStatus(payload["status"]),
            currency=Currency(payload["currency"]),
            line_items=tuple(
                CheckoutSessionLineItem.from_response(item)
                for item in payload["line_items"]
            ),
            livemode=payload["livemode"],
            url=payload["url"],
            created_at=from_unix(payload["created_at"]),
            updated_at=from_unix(payload["updated_at"]),
            amount=payload.get("amount"),
            customer_reference_id=payload.get("customer_reference_id"),
            billing_details_collection=payload.get("billing_details_collection"),
            client_secret=payload.get("client_secret"),
            payment_intent=PaymentIntent.from_response(intent) if intent else None,
            metadata=Metadata(metadata) if metadata is not None else None,
            success_url=payload.get("success_url"),
            cancel_url=payload.get("cancel_url"),
            payment_methods=(
                tuple(PaymentMethod(m) for m in methods) if methods is not None else None
            ),
            payment_method_options=(
                PaymentMethodOptions.from_response(options) if options else None
            ),
            description=payload.get("description"),
            submit_type=payload.get("submit_type"),
            statement_descriptor=payload.get("statement_descriptor"),
            expires_at=optional_timestamp(payload.get("expires_at")),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class CreateCheckoutSession:
    currency: Currency
    line_items: Sequence[CheckoutSessionLineItem]
    success_url: str
    cancel_url: str
    payment_methods: Sequence[PaymentMethod]
    customer_reference_id: Optional[str] = None
    payment_method_options: Optional[PaymentMethodOptions] = None
    expires_at: Optional[datetime] = None
    billing_details_collection: Optional[str] = None
    submit_type: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[Metadata] = None


class CheckoutSessions(Creatable, Retrievable):
    path = "/checkout_sessions"
    model = CheckoutSession
    id_type = CheckoutSessionId

    def expire(self, resource_id: str) -> CheckoutSession:
        return self._action(resource_id, "expire")
