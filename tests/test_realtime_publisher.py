"""Tests for the websocket connection manager and realtime publisher."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone

from app.domain.entities import Notification
from app.infrastructure.notifications import (
    NotificationConnectionManager,
    NotificationPublisher,
    serialize_notification,
)


class FakeWebSocket:
    def __init__(self, *, broken: bool = False) -> None:
        self.accepted = False
        self.sent: list[dict] = []
        self.broken = broken

    async def accept(self) -> None:
        self.accepted = True

    async def send_json(self, message: dict) -> None:
        if self.broken:
            raise RuntimeError("socket closed")
        self.sent.append(message)


def _notification(user_id: str = "owner") -> Notification:
    return Notification(
        id="n-1",
        user_id=user_id,
        type="match",
        title="Potential Match Found!",
        message="A found item similar to your lost keys has been posted.",
        related_item_id="item-1",
        created_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    )


def test_stale_connection_is_dropped_without_blocking_others() -> None:
    manager = NotificationConnectionManager()
    healthy, stale = FakeWebSocket(), FakeWebSocket(broken=True)

    async def _scenario() -> None:
        await manager.connect("owner", healthy)
        await manager.connect("owner", stale)
        await manager.send_to_user("owner", {"type": "notification"})

    asyncio.run(_scenario())

    assert healthy.accepted
    assert healthy.sent == [{"type": "notification"}]
    manager.disconnect("owner", healthy)
    assert not manager.has_connections("owner")


def test_publisher_sends_inside_running_loop() -> None:
    manager = NotificationConnectionManager()
    publisher = NotificationPublisher(manager)
    websocket = FakeWebSocket()
    notification = _notification()

    async def _scenario() -> None:
        await manager.connect("owner", websocket)
        publisher.dispatch(notification)
        await asyncio.sleep(0)

    asyncio.run(_scenario())

    assert websocket.sent == [
        {"type": "notification", "data": serialize_notification(notification)}
    ]
    assert websocket.sent[0]["data"]["created_at"] == "2024-05-01T12:00:00+00:00"


def test_publisher_is_a_no_op_without_connections() -> None:
    publisher = NotificationPublisher(NotificationConnectionManager())

    # No event loop and no worker thread, as in the command line script.
    publisher.dispatch(_notification())
