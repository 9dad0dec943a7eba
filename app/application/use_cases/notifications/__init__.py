"""Use cases for recording and delivering notifications."""

from .dispatch import dispatch_push
from .inbox import list_notifications, mark_notifications_read
from .notify import notify_users
from .record import record_notification
from .selection import filter_by_distance, select_direct, select_geotargeted

__all__ = [
    "dispatch_push",
    "filter_by_distance",
    "list_notifications",
    "mark_notifications_read",
    "notify_users",
    "record_notification",
    "select_direct",
    "select_geotargeted",
]
