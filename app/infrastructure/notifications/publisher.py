"""Hand freshly recorded notifications to the user's open websockets."""

from __future__ import annotations

import asyncio
from typing import Any

from anyio import from_thread

from app.domain.entities import Notification

from .manager import NotificationConnectionManager, notification_manager


class NotificationPublisher:
    """Serialize notifications and schedule their realtime delivery."""

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager

    def dispatch(self, notification: Notification) -> None:
        """Deliver ``notification`` to its user when they are connected.

        Sync callers must run inside an anyio worker thread (the FastAPI
        threadpool); outside of one there can be no open connections.
        """

        if not self._manager.has_connections(notification.user_id):
            return

        message = {"type": "notification", "data": serialize_notification(notification)}
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            from_thread.run(self._manager.send_to_user, notification.user_id, message)
        else:
            loop.create_task(self._manager.send_to_user(notification.user_id, message))


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the websocket representation of ``notification``."""

    return {
        "id": notification.id,
        "user_id": notification.user_id,
        "type": notification.type,
        "title": notification.title,
        "message": notification.message,
        "related_item_id": notification.related_item_id,
        "read": notification.read,
        "created_at": notification.created_at.isoformat()
        if notification.created_at
        else None,
    }


notification_publisher = NotificationPublisher(notification_manager)


def dispatch_notification(notification: Notification) -> None:
    """Publish ``notification`` through the shared publisher."""

    notification_publisher.dispatch(notification)


__all__ = [
    "NotificationPublisher",
    "dispatch_notification",
    "notification_publisher",
    "serialize_notification",
]
