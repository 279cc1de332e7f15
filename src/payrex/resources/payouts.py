"""
Payouts to the merchant's bank account and the transactions they settle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..core.types import (
    List,
    ListParams,
    PayoutId,
    PayoutTransactionId,
    from_unix,
    optional_timestamp,
)
from .base import ResourceClient

__all__ = [
    "Payout",
    "PayoutDestination",
    "PayoutStatus",
    "PayoutTransaction",
    "PayoutTransactionType",
    "Payouts",
]


class PayoutStatus(str, Enum):
    PENDING = "pending"
    IN_TRANSIT = "in_transit"
    FAILED = "failed"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        return self.value


class PayoutTransactionType(str, Enum):
    PAYMENT = "payment"
    REFUND = "refund"
    ADJUSTMENT = "adjustment"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PayoutDestination:
    account_name: str
    account_number: str
    bank_name: str

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "PayoutDestination":
        return cls(
            account_name=payload["account_name"],
            account_number=payload["account_number"],
            bank_name=payload["bank_name"],
        )


@dataclass(frozen=True)
class Payout:
    id: PayoutId
    amount: int
    livemode: bool
    status: PayoutStatus
    created_at: datetime
    destination: Optional[PayoutDestination] = None
    net_amount: Optional[int] = None
    updated_at: Optional[datetime] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Payout":
        destination = payload.get("destination")
        return cls(
            id=PayoutId.unchecked(payload["id"]),
            amount=payload["amount"],
            livemode=payload["livemode"],
            status=PayoutStatus(payload["status"]),
            created_at=from_unix(payload["created_at"]),
            destination=(
                PayoutDestination.from_response(destination) if destination else None
            ),
            net_amount=payload.get("net_amount"),
            updated_at=optional_timestamp(payload.get("updated_at")),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class PayoutTransaction:
    id: PayoutTransactionId
    amount: int
    net_amount: int
    transaction_id: str
    transaction_type: PayoutTransactionType
    created_at: datetime
    updated_at: Optional[datetime] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "PayoutTransaction":
        return cls(
            id=PayoutTransactionId.unchecked(payload["id"]),
            amount=payload["amount"],
            net_amount=payload["net_amount"],
            transaction_id=payload["transaction_id"],
            transaction_type=PayoutTransactionType(payload["transaction_type"]),
            created_at=from_unix(payload["created_at"]),
            updated_at=optional_timestamp(payload.get("updated_at")),
            raw=dict(payload),
        )


class Payouts(ResourceClient):
    path = "/payouts"
    model = Payout
    id_type = PayoutId

    def list_transactions(
        self, resource_id: str, params: Optional[ListParams] = None
    ) -> List[PayoutTransaction]:
        return self._request(
            "GET",
            f"{self._instance_path(resource_id)}/transactions",
            List.decoder(PayoutTransaction.from_response),
            params,
        )
