"""
Payments created when a payment intent succeeds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..core.types import (
    Currency,
    Metadata,
    PaymentId,
    PaymentIntentId,
    PaymentMethod,
    from_unix,
)
from .base import Retrievable, Updatable

__all__ = [
    "Address",
    "Billing",
    "CardDetails",
    "Payment",
    "PaymentMethodDetails",
    "PaymentStatus",
    "Payments",
    "UpdatePayment",
]


class PaymentStatus(str, Enum):
    PAID = "paid"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Address":
        return cls(**{name: payload.get(name) for name in cls.__dataclass_fields__})


@dataclass(frozen=True)
class Billing:
    name: str
    email: str
    address: Address
    phone: Optional[str] = None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Billing":
        return cls(
            name=payload["name"],
            email=payload["email"],
            address=Address.from_response(payload["address"]),
            phone=payload.get("phone"),
        )


@dataclass(frozen=True)
class CardDetails:
    first6: str
    last4: str
    brand: str

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "CardDetails":
        return cls(first6=payload["first6"], last4=payload["last4"], brand=payload["brand"])


@dataclass(frozen=True)
class PaymentMethodDetails:
    type: PaymentMethod
    card: Optional[CardDetails] = None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "PaymentMethodDetails":
        card = payload.get("card")
        return cls(
            type=PaymentMethod(payload["type"]),
            card=CardDetails.from_response(card) if card else None,
        )


@dataclass(frozen=True)
class Payment:
    id: PaymentId
    amount: int
    amount_refunded: int
    currency: Currency
    fee: int
    livemode: bool
    net_amount: int
    payment_intent_id: PaymentIntentId
    status: PaymentStatus
    payment_method: PaymentMethodDetails
    refunded: bool
    created_at: datetime
    updated_at: datetime
    billing: Optional[Billing] = None
    description: Optional[str] = None
    metadata: Optional[Metadata] = None
    customer: Optional[Dict[str, Any]] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Payment":
        billing = payload.get("billing")
        metadata = payload.get("metadata")
        return cls(
            id=PaymentId.unchecked(payload["id"]),
            amount=payload["amount"],
            amount_refunded=payload["amount_refunded"],
            currency=Currency(payload["currency"]),
            fee=payload["fee"],
            livemode=payload["livemode"],
            net_amount=payload["net_amount"],
            payment_intent_id=PaymentIntentId.unchecked(payload["payment_intent_id"]),
            status=PaymentStatus(payload["status"]),
            payment_method=PaymentMethodDetails.from_response(payload["payment_method"]),
            refunded=payload["refunded"],
            created_at=from_unix(payload["created_at"]),
            updated_at=from_unix(payload["updated_at"]),
            billing=Billing.from_response(billing) if billing else None,
            description=payload.get("description"),
            metadata=Metadata(metadata) if metadata is not None else None,
            customer=payload.get("customer"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class UpdatePayment:
    description: Optional[str] = None
    metadata: Optional[Metadata] = None


class Payments(Retrievable, Updatable):
    path = "/payments"
    model = Payment
    id_type = PaymentId
