"""
Billing statements: itemised requests for payment sent to a customer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from ..core.types import (
    BillingStatementId,
    Currency,
    CustomerId,
    Metadata,
    PaymentMethod,
    from_unix,
    optional_timestamp,
)
from .base import Creatable, Deletable, Listable, Retrievable, Updatable
from .billing_statement_line_items import BillingStatementLineItem

__all__ = [
    "BillingStatement",
    "BillingStatementStatus",
    "BillingStatements",
    "CreateBillingStatement",
    "PaymentSettings",
    "UpdateBillingStatement",
]


class BillingStatementStatus(str, Enum):
    DRAFT = "draft"
    OPEN = "open"
    PAID = "paid"
    VOID = "void"
    UNCOLLECTIBLE = "uncollectible"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PaymentSettings:
    payment_methods: Sequence[PaymentMethod]

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "PaymentSettings":
        return cls(
            payment_methods=tuple(PaymentMethod(m) for m in payload["payment_methods"])
        )


@dataclass(frozen=True)
class BillingStatement:
    id: BillingStatementId
    amount: int
    currency: Currency
    customer_id: CustomerId
    livemode: bool
    status: BillingStatementStatus
    payment_settings: PaymentSettings
    created_at: datetime
    updated_at: datetime
    billing_details_collection: Optional[str] = None
    description: Optional[str] = None
    due_at: Optional[datetime] = None
    finalized_at: Optional[datetime] = None
    billing_statement_merchant_name: Optional[str] = None
    billing_statement_number: Optional[str] = None
    billing_statement_url: Optional[str] = None
    line_items: Optional[Tuple[BillingStatementLineItem, ...]] = None
    metadata: Optional[Metadata] = None
    # Expanded objects are kept as returned.
    payment_intent: Optional[Dict[str, Any]] = None
    customer: Optional[Dict[str, Any]] = None
    setup_future_usage: Optional[str] = None
    statement_descriptor: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "BillingStatement":
        line_items = payload.get("line_items")
        metadata = payload.get("metadata")
        return cls(
            id=BillingStatementId.unchecked(payload["id"]),
            amount=payload["amount"],
            currency=Currency(payload["currency"]),
            customer_id=CustomerId.unchecked(payload["customer_id"]),
            livemode=payload["livemode"],
            status=BillingStatementStatus(payload["status"]),
            payment_settings=PaymentSettings.from_response(payload["payment_settings"]),
            created_at=from_unix(payload["created_at"]),
            updated_at=from_unix(payload["updated_at"]),
            billing_details_collection=payload.get("billing_details_collection"),
            description=payload.get("description"),
            due_at=optional_timestamp(payload.get("due_at")),
            finalized_at=optional_timestamp(payload.get("finalized_at")),
            billing_statement_merchant_name=payload.get("billing_statement_merchant_name"),
            billing_statement_number=payload.get("billing_statement_number"),
            billing_statement_url=payload.get("billing_statement_url"),
            line_items=(
                tuple(BillingStatementLineItem.from_response(i) for i in line_items)
                if line_items is not None
                else None
            ),
            metadata=Metadata(metadata) if metadata is not None else None,
            payment_intent=payload.get("payment_intent"),
            customer=payload.get("customer"),
            setup_future_usage=payload.get("setup_future_usage"),
            statement_descriptor=payload.get("statement_descriptor"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class CreateBillingStatement:
    customer_id: CustomerId
    currency: Currency
    payment_settings: Optional[PaymentSettings] = None
    billing_details_collection: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[Metadata] = None


@dataclass(frozen=True)
class UpdateBillingStatement:
    customer_id: Optional[CustomerId] = None
    payment_settings: Optional[PaymentSettings] = None
    billing_details_collection: Optional[str] = None
    description: Optional[str] = None
    metadata: Optional[Metadata] = None
    due_at: Optional[datetime] = None


class BillingStatements(Creatable, Retrievable, Updatable, Deletable, Listable):
    path = "/billing_statements"
    model = BillingStatement
    id_type = BillingStatementId

    def finalize(self, resource_id: str) -> BillingStatement:
        """Move a draft statement to ``open`` so it can be paid."""
        return self._action(resource_id, "finalize")

    def send(self, resource_id: str) -> BillingStatement:
        return self._action(resource_id, "send")

    def void(self, resource_id: str) -> BillingStatement:
        return self._action(resource_id, "void")

    def mark_uncollectible(self, resource_id: str) -> BillingStatement:
        return self._action(resource_id, "mark_uncollectible")
