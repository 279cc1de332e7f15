"""
Value types shared by the PayRex resources: typed identifiers, enumerations,
metadata, Unix-second timestamps and list pagination.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterator,
    List as _ListType,
    Mapping,
    Optional,
    Tuple,
    TypeVar,
)

from .errors import InvalidRequestError

__all__ = [
    "BillingStatementId",
    "BillingStatementLineItemId",
    "CaptureMethod",
    "CardOptions",
    "CheckoutSessionId",
    "Currency",
    "CustomerId",
    "Deleted",
    "EventId",
    "EventType",
    "List",
    "ListParams",
    "Metadata",
    "PaymentId",
    "PaymentIntentId",
    "PaymentMethod",
    "PaymentMethodOptions",
    "PayoutId",
    "PayoutTransactionId",
    "RefundId",
    "ResourceId",
    "WebhookId",
    "from_unix",
    "optional_timestamp",
    "to_unix",
]

T = TypeVar("T")


class ResourceId(str):
    """
    A resource identifier that must carry its resource's prefix.

    Subclasses set ``prefix``; construction with a foreign id raises
    :class:`InvalidRequestError`. :meth:`unchecked` skips the check.
    """

    prefix = ""

    def __new__(cls, value: str) -> "ResourceId":
        if not isinstance(value, str) or not value.startswith(cls.prefix):
            raise InvalidRequestError(
                f"Invalid {cls.__name__}: expected prefix '{cls.prefix}', got '{value}'"
            )
        return super().__new__(cls, value)

    @classmethod
    def unchecked(cls, value: str) -> "ResourceId":
        return str.__new__(cls, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"


class PaymentIntentId(ResourceId):
    prefix = "pi_"


class CustomerId(ResourceId):
    prefix = "cus_"


class BillingStatementId(ResourceId):
    prefix = "bstm_"


class BillingStatementLineItemId(ResourceId):
    prefix = "bstm_li_"


class CheckoutSessionId(ResourceId):
    prefix = "cs_"


class PaymentId(ResourceId):
    prefix = "pay_"


class RefundId(ResourceId):
    prefix = "ref_"


class WebhookId(ResourceId):
    prefix = "wh_"


class EventId(ResourceId):
    prefix = "evt_"


class PayoutId(ResourceId):
    prefix = "po_"


class PayoutTransactionId(ResourceId):
    prefix = "pot_"


class Currency(str, Enum):
    """Currencies accepted by PayRex. Only the Philippine peso for now."""

    PHP = "PHP"

    @property
    def symbol(self) -> str:
        return "₱"

    @property
    def decimal_places(self) -> int:
        return 2

    def format_amount(self, amount: int) -> str:
        """Render an amount in the smallest unit, e.g. ``10050`` -> ``₱100.50``."""
        divisor = 10 ** self.decimal_places
        major, minor = divmod(abs(amount), divisor)
        sign = "-" if amount < 0 else ""
        return f"{self.symbol}{sign}{major}.{minor:0{self.decimal_places}d}"

    def __str__(self) -> str:
        return self.value


class PaymentMethod(str, Enum):
    CARD = "card"
    GCASH = "gcash"
    MAYA = "maya"
    QRPH = "qrph"

    def __str__(self) -> str:
        return self.value


class CaptureMethod(str, Enum):
    AUTOMATIC = "automatic"
    MANUAL = "manual"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CardOptions:
    capture_type: Optional[CaptureMethod] = None
    allowed_bins: Optional[Tuple[str, ...]] = None
    allowed_funding: Optional[Tuple[str, ...]] = None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "CardOptions":
        capture_type = payload.get("capture_type")
        bins = payload.get("allowed_bins")
        funding = payload.get("allowed_funding")
        return cls(
            capture_type=CaptureMethod(capture_type) if capture_type else None,
            allowed_bins=tuple(bins) if bins is not None else None,
            allowed_funding=tuple(funding) if funding is not None else None,
        )


@dataclass(frozen=True)
class PaymentMethodOptions:
    card: Optional[CardOptions] = None

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "PaymentMethodOptions":
        card = payload.get("card")
        return cls(card=CardOptions.from_response(card) if card else None)


class Metadata(Dict[str, str]):
    """
    String key/value pairs attached to a resource.

    Values are coerced to ``str`` on insertion, matching what the API stores.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__()
        self.update(*args, **kwargs)

    def __setitem__(self, key: str, value: Any) -> None:
        super().__setitem__(str(key), str(value))

    def update(self, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        for key, value in dict(*args, **kwargs).items():
            self[key] = value

    def setdefault(self, key: str, default: Any = "") -> str:  # type: ignore[override]
        if key not in self:
            self[key] = default
        return self[key]

    @classmethod
    def with_pair(cls, key: str, value: Any) -> "Metadata":
        return cls({key: value})


def from_unix(seconds: int) -> datetime:
    """Convert Unix seconds from the API into an aware UTC datetime."""
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        raise TypeError(f"expected Unix seconds, got {seconds!r}")
    return datetime.fromtimestamp(int(seconds), tz=timezone.utc)


def to_unix(value: datetime) -> int:
    """Convert a datetime into Unix seconds; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp())


def optional_timestamp(value: Optional[int]) -> Optional[datetime]:
    return None if value is None else from_unix(value)


class EventType(str):
    """
    An event name of the form ``<resource>.<action>``, e.g.
    ``payment_intent.succeeded``.
    """

    RESOURCES = frozenset(
        {
            "billing_statement",
            "billing_statement_line_item",
            "checkout_session",
            "payment_intent",
            "payout",
            "refund",
        }
    )

    def __new__(cls, value: str) -> "EventType":
        parts = value.split(".") if isinstance(value, str) else []
        if len(parts) != 2 or not all(parts):
            raise InvalidRequestError(f"Invalid event type '{value}'")
        if parts[0] not in cls.RESOURCES:
            raise InvalidRequestError(f"Unknown event resource '{parts[0]}'")
        return super().__new__(cls, value)

    @property
    def resource(self) -> str:
        return self.split(".", 1)[0]

    @property
    def action(self) -> str:
        return self.split(".", 1)[1]


@dataclass(frozen=True)
class Deleted:
    """Acknowledgement returned when a resource is deleted."""

    id: str
    deleted: bool
    object: Optional[str]

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Deleted":
        return cls(
            id=payload["id"],
            deleted=bool(payload.get("deleted", True)),
            object=payload.get("resource") or payload.get("object"),
        )


@dataclass(frozen=True)
class ListParams:
    """Cursor pagination parameters; ``limit`` is clamped to 1..100."""

    limit: Optional[int] = None
    starting_after: Optional[str] = None
    ending_before: Optional[str] = None

    def __post_init__(self) -> None:
        if self.limit is not None:
            object.__setattr__(self, "limit", min(max(int(self.limit), 1), 100))


@dataclass(frozen=True)
class List(Generic[T]):
    """One page of a list endpoint."""

    data: _ListType[T]
    has_more: bool
    object: str = "list"
    next_page: Optional[str] = None
    total_count: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    @classmethod
    def decoder(
        cls, item: Callable[[Mapping[str, Any]], T]
    ) -> Callable[[Mapping[str, Any]], "List[T]"]:
        """Build a decoder for a page whose ``data`` items decode with ``item``."""

        def decode(payload: Mapping[str, Any]) -> "List[T]":
            return cls(
                data=[item(entry) for entry in payload["data"]],
                has_more=bool(payload.get("has_more", False)),
                object=payload.get("resource") or payload.get("object") or "list",
                next_page=payload.get("next_page"),
                total_count=payload.get("total_count"),
                raw=dict(payload),
            )

        return decode
