"""
Line items of a billing statement.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from ..core.types import (
    BillingStatementId,
    BillingStatementLineItemId,
    from_unix,
    optional_timestamp,
)
from .base import Creatable, Deletable, Updatable

__all__ = [
    "BillingStatementLineItem",
    "BillingStatementLineItems",
    "CreateBillingStatementLineItem",
    "UpdateBillingStatementLineItem",
]


@dataclass(frozen=True)
class BillingStatementLineItem:
    id: BillingStatementLineItemId
    unit_price: int
    quantity: int
    billing_statement_id: BillingStatementId
    livemode: bool
    created_at: datetime
    description: Optional[str] = None
    updated_at: Optional[datetime] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def amount(self) -> int:
        return self.unit_price * self.quantity

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "BillingStatementLineItem":
        return cls(
            id=BillingStatementLineItemId.unchecked(payload["id"]),
            unit_price=payload["unit_price"],
            quantity=payload["quantity"],
            billing_statement_id=BillingStatementId.unchecked(
                payload["billing_statement_id"]
            ),
            livemode=payload["livemode"],
            created_at=from_unix(payload["created_at"]),
            description=payload.get("description"),
            updated_at=optional_timestamp(payload.get("updated_at")),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class CreateBillingStatementLineItem:
    billing_statement_id: BillingStatementId
    description: str
    unit_price: int
    quantity: int


@dataclass(frozen=True)
class UpdateBillingStatementLineItem:
    description: Optional[str] = None
    unit_price: Optional[int] = None
    quantity: Optional[int] = None


class BillingStatementLineItems(Creatable, Updatable, Deletable):
    path = "/billing_statement_line_items"
    model = BillingStatementLineItem
    id_type = BillingStatementLineItemId
