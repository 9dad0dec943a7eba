"""Domain entity representing a browser Web Push subscription."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class PushSubscription:
    """Registered push endpoint able to receive Web Push messages."""

    id: str | None
    user_id: str
    endpoint: str
    p256dh: str
    auth: str
    latitude: float | None = None
    longitude: float | None = None
    radius_km: float | None = None
    device_info: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def keys(self) -> dict[str, str]:
        """Return the key pair in the shape expected by Web Push clients."""

        return {"p256dh": self.p256dh, "auth": self.auth}


__all__ = ["PushSubscription"]
