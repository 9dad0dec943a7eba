"""Entities describing a notification dispatch and its outcome."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .notification import Notification


class DeliveryStatus(str, Enum):
    """Terminal state of a single push delivery attempt."""

    DELIVERED = "delivered"
    FAILED_TRANSIENT = "failed_transient"
    FAILED_PERMANENT = "failed_permanent"


@dataclass(frozen=True)
class DispatchRequest:
    """Input for one notify operation.

    ``latitude`` and ``longitude`` together switch the dispatch to geotargeted
    mode, where ``user_id`` is the user who triggered the event and is
    excluded from the recipients.
    """

    type: str
    user_id: str
    title: str
    message: str
    related_item_id: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    radius_km: float | None = None

    @property
    def is_geotargeted(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass(frozen=True)
class DeliveryOutcome:
    """Result of delivering a push message to one subscription."""

    subscription_id: str | None
    endpoint: str
    status: DeliveryStatus
    removed: bool = False


@dataclass
class DispatchResult:
    """Aggregate result returned by a notify operation."""

    notification: Notification
    outcomes: list[DeliveryOutcome] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.outcomes)

    @property
    def delivered(self) -> int:
        return sum(1 for o in self.outcomes if o.status is DeliveryStatus.DELIVERED)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if o.status is not DeliveryStatus.DELIVERED)

    @property
    def removed(self) -> int:
        return sum(1 for o in self.outcomes if o.removed)


__all__ = [
    "DeliveryOutcome",
    "DeliveryStatus",
    "DispatchRequest",
    "DispatchResult",
]
