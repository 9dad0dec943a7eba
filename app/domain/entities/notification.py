"""Domain entity representing an in-app notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Notification:
    """Alert shown to a single user inside the application."""

    id: str | None
    user_id: str
    type: str
    title: str
    message: str
    related_item_id: str | None = None
    read: bool = False
    created_at: datetime | None = None


__all__ = ["Notification"]
