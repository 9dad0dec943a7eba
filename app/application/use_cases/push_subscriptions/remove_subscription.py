"""Use case for removing a push subscription."""

from sqlalchemy.orm import Session

from app.infrastructure.repositories import PushSubscriptionRepository


def remove_subscription(session: Session, endpoint: str) -> None:
    """Delete the subscription registered for ``endpoint``."""

    if not PushSubscriptionRepository(session).delete_by_endpoint(endpoint):
        raise ValueError("Push subscription not found")
