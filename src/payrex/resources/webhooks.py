"""
Webhook endpoints that receive event notifications.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from ..core.types import EventType, ListParams, WebhookId, from_unix
from .base import Creatable, Deletable, Listable, Retrievable, Updatable

__all__ = [
    "CreateWebhook",
    "UpdateWebhook",
    "Webhook",
    "WebhookListParams",
    "WebhookStatus",
    "Webhooks",
]


class WebhookStatus(str, Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Webhook:
    id: WebhookId
    status: WebhookStatus
    livemode: bool
    url: str
    events: Tuple[str, ...]
    created_at: datetime
    updated_at: datetime
    secret_key: Optional[str] = field(default=None, repr=False)
    description: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, payload: Mapping[str, Any]) -> "Webhook":
        return cls(
            id=WebhookId.unchecked(payload["id"]),
            status=WebhookStatus(payload["status"]),
            livemode=payload["livemode"],
            url=payload["url"],
            events=tuple(payload["events"]),
            created_at=from_unix(payload["created_at"]),
            updated_at=from_unix(payload["updated_at"]),
            secret_key=payload.get("secret_key"),
            description=payload.get("description"),
            raw=dict(payload),
        )


@dataclass(frozen=True)
class CreateWebhook:
    url: str
    events: Sequence[EventType]
    description: Optional[str] = None


@dataclass(frozen=True)
class UpdateWebhook:
    url: Optional[str] = None
    events: Optional[Sequence[EventType]] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class WebhookListParams(ListParams):
    """List filters for webhooks on top of the cursor parameters."""

    url: Optional[str] = None
    description: Optional[str] = None


class Webhooks(Creatable, Retrievable, Updatable, Deletable, Listable):
    path = "/webhooks"
    model = Webhook
    id_type = WebhookId

    def enable(self, resource_id: str) -> Webhook:
        return self._action(resource_id, "enable")

    def disable(self, resource_id: str) -> Webhook:
        return self._action(resource_id, "disable")
