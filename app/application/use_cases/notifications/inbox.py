"""Use cases backing the in-app notification inbox."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from app.domain.entities import Notification
from app.infrastructure.repositories import NotificationRepository


def list_notifications(
    session: Session,
    user_id: str,
    *,
    unread_only: bool = False,
    limit: int | None = 50,
) -> Sequence[Notification]:
    """Return the newest notifications of ``user_id``."""

    return NotificationRepository(session).list_for_user(
        user_id, unread_only=unread_only, limit=limit
    )


def mark_notifications_read(
    session: Session, user_id: str, notification_ids: Iterable[str]
) -> int:
    """Flag the given notifications of ``user_id`` as read."""

    unique_ids = list(dict.fromkeys(notification_ids))
    return NotificationRepository(session).mark_as_read(unique_ids, user_id=user_id)
