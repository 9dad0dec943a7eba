from .notification import (
    NotificationMarkReadRequest,
    NotificationRead,
    NotifyUsersRequest,
    NotifyUsersResponse,
)
from .push_subscription import (
    PushConfigRead,
    PushSubscriptionCreate,
    PushSubscriptionKeys,
    PushSubscriptionRead,
)

__all__ = [
    "NotificationMarkReadRequest",
    "NotificationRead",
    "NotifyUsersRequest",
    "NotifyUsersResponse",
    "PushConfigRead",
    "PushSubscriptionCreate",
    "PushSubscriptionKeys",
    "PushSubscriptionRead",
]
