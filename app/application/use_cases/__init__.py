"""Aggregate application use cases."""

from .notifications import notify_users
from .push_subscriptions import register_subscription, remove_subscription

__all__ = [
    "notify_users",
    "register_subscription",
    "remove_subscription",
]
