"""
Events recorded for changes to PayRex resources.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from ..core.types import EventId, from_unix
from .base import Listable, Retrievable

__all__ = ["Event", "Events"]


@dataclass(frozen=True)
class Event:
    id: EventId
    type: str
    data: Any
    created_at: datetime
    updated_at: datetime
    pending_webhooks: Optional[int] = None
    previous_attributes: Any = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def resource(self) -> str:
        return self.type.split(".", 1)[0]

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Event":
        # ``type`` is kept as sent; unknown event names must not break decoding.
        return cls(
            id=EventId.unchecked(payload["id"]),
            type=payload["type"],
            data=payload["data"],
            created_at=from_unix(payload["created_at"]),
            updated_at=from_unix(payload["updated_at"]),
            pending_webhooks=payload.get("pending_webhooks"),
            previous_attributes=payload.get("previous_attributes"),
            raw=dict(payload),
        )


class Events(Retrievable, Listable):
    path = "/events"
    model = Event
    id_type = EventId
