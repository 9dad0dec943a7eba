"""Use case for persisting in-app notifications."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository
from app.utils import now_utc


def _require_text(value: str | None, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError(f"{field_name} is required")
    return str(value)


def record_notification(
    session: Session,
    *,
    user_id: str,
    notification_type: str,
    title: str,
    message: str,
    related_item_id: str | None = None,
) -> Notification:
    """Store an unread notification for ``user_id`` and return it.

    Persistence errors propagate to the caller untouched.
    """

    notification = Notification(
        id=None,
        user_id=_require_text(user_id, "userId"),
        type=_require_text(notification_type, "type"),
        title=_require_text(title, "title"),
        message=_require_text(message, "message"),
        related_item_id=related_item_id or None,
        read=False,
        created_at=now_utc(),
    )
    return NotificationRepository(session).create(notification)
