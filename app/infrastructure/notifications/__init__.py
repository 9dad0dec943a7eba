"""Push and realtime notification helpers for the infrastructure layer."""

from .manager import NotificationConnectionManager, notification_manager
from .payload import build_push_payload, encode_push_payload
from .publisher import (
    NotificationPublisher,
    dispatch_notification,
    notification_publisher,
    serialize_notification,
)
from .push_sender import (
    GONE_STATUS_CODES,
    PushSendResult,
    PushSender,
    WebPushSender,
    build_push_sender,
)

__all__ = [
    "GONE_STATUS_CODES",
    "NotificationConnectionManager",
    "NotificationPublisher",
    "PushSendResult",
    "PushSender",
    "WebPushSender",
    "build_push_sender",
    "build_push_payload",
    "dispatch_notification",
    "encode_push_payload",
    "notification_manager",
    "notification_publisher",
    "serialize_notification",
]
