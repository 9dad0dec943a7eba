"""Domain entities exposed by the application."""

from .dispatch import DeliveryOutcome, DeliveryStatus, DispatchRequest, DispatchResult
from .notification import Notification
from .push_subscription import PushSubscription

__all__ = [
    "DeliveryOutcome",
    "DeliveryStatus",
    "DispatchRequest",
    "DispatchResult",
    "Notification",
    "PushSubscription",
]
