"""
Refunds of a completed payment, in full or in part.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..core.types import Currency, Metadata, PaymentId, RefundId, from_unix
from .base import Creatable, Updatable

__all__ = [
    "CreateRefund",
    "Refund",
    "RefundReason",
    "RefundStatus",
    "Refunds",
    "UpdateRefund",
]


class RefundStatus(str, Enum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


class RefundReason(str, Enum):
    FRAUDULENT = "fraudulent"
    REQUESTED_BY_CUSTOMER = "requested_by_customer"
    PRODUCT_OUT_OF_STOCK = "product_out_of_stock"
    PRODUCT_WAS_DAMAGED = "product_was_damaged"
    SERVICE_NOT_PROVIDED = "service_not_provided"
    SERVICE_MISALIGNED = "service_misaligned"
    WRONG_PRODUCT_RECEIVED = "wrong_product_received"
    OTHERS = "others"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Refund:
    id: RefundId
    amount: int
    currency: Currency
    livemode: bool
    status: RefundStatus
    reason: RefundReason
    payment_id: PaymentId
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    remarks: Optional[str] = None
    metadata: Optional[Metadata] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Refund":
        metadata = payload.get("metadata")
        return cls(
            id=RefundId.unchecked(payload["id"]),
            amount=payload["amount"],
            currency=Currency(payload["currency"]),
            livemode=payload["livemode"],
            status=RefundStatus(payload["status"]),
            reason=RefundReason(payload["reason"]),
            payment_id=PaymentId.unchecked(payload["payment_id"]),
            created_at=from_unix(payload["created_at"]),
            updated_at=from_unix(payload["updated_at"]),
            description=payload.get("description"),
            remarks=payload.get("remarks"),
            metadata=Metadata(metadata) if metadata is not None else None,
            raw=dict(payload),
        )


@dataclass(frozen=True)
class CreateRefund:
    """``remarks`` is required by the API when ``reason`` is ``others``."""

    payment_id: PaymentId
    amount: int
    currency: Currency
    reason: RefundReason
    description: Optional[str] = None
    remarks: Optional[str] = None
    metadata: Optional[Metadata] = None


@dataclass(frozen=True)
class UpdateRefund:
    metadata: Optional[Metadata] = None


class Refunds(Creatable, Updatable):
    path = "/refunds"
    model = Refund
    id_type = RefundId
