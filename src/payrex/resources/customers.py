"""
Customers that billing statements are issued to.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from ..core.types import Currency, CustomerId, Metadata, from_unix, optional_timestamp
from .base import Creatable, Deletable, Listable, Retrievable, Updatable

__all__ = ["CreateCustomer", "Customer", "Customers", "UpdateCustomer"]


@dataclass(frozen=True)
class Customer:
    id: CustomerId
    livemode: bool
    created_at: datetime
    billing_statement_prefix: Optional[str] = None
    currency: Optional[Currency] = None
    email: Optional[str] = None
    name: Optional[str] = None
    metadata: Optional[Metadata] = None
    next_billing_statement_sequence_number: Optional[int] = None
    updated_at: Optional[datetime] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Customer":
        currency = payload.get("currency")
        metadata = payload.get("metadata")
        return cls(
            id=CustomerId.unchecked(payload["id"]),
            livemode=payload["livemode"],
            created_at=from_unix(payload["created_at"]),
            billing_statement_prefix=payload.get("billing_statement_prefix"),
            currency=Currency(currency) if currency else None,
            email=payload.get("email"),
            name=payload.get("name"),
            metadata=Metadata(metadata) if metadata is not None else None,
            next_billing_statement_sequence_number=payload.get(
                "next_billing_statement_sequence_number"
            ),
            updated_at=optional_timestamp(payload.get("updated_at")),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class CreateCustomer:
    currency: Optional[Currency] = None
    name: Optional[str] = None
    email: Optional[str] = None
    billing_statement_prefix: Optional[str] = None
    metadata: Optional[Metadata] = None


@dataclass(frozen=True)
class UpdateCustomer:
    currency: Optional[Currency] = None
    name: Optional[str] = None
    email: Optional[str] = None
    billing_statement_prefix: Optional[str] = None
    metadata: Optional[Metadata] = None


class Customers(Creatable, Retrievable, Updatable, Deletable, Listable):
    path = "/customers"
    model = Customer
    id_type = CustomerId
