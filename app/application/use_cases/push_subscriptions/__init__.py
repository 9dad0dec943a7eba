"""Use cases for managing push subscriptions."""

from .register_subscription import register_subscription
from .remove_subscription import remove_subscription

__all__ = [
    "register_subscription",
    "remove_subscription",
]
