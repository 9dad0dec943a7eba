"""Use case for registering a browser push subscription."""

from typing import Any

from sqlalchemy.orm import Session

from app.domain.entities import PushSubscription
from app.infrastructure.repositories import PushSubscriptionRepository

from .validators import ensure_location_pair, ensure_positive_radius


def register_subscription(
    session: Session,
    *,
    user_id: str,
    endpoint: str,
    p256dh: str,
    auth: str,
    latitude: float | None = None,
    longitude: float | None = None,
    radius_km: float | None = None,
    device_info: dict[str, Any] | None = None,
) -> PushSubscription:
    """Create or refresh the subscription identified by ``endpoint``."""

    if not user_id or not user_id.strip():
        raise ValueError("userId is required")
    if not endpoint or not endpoint.strip():
        raise ValueError("endpoint is required")
    if not p256dh or not auth:
        raise ValueError("Subscription keys p256dh and auth are required")

    latitude, longitude = ensure_location_pair(latitude, longitude)

    subscription = PushSubscription(
        id=None,
        user_id=user_id,
        endpoint=endpoint.strip(),
        p256dh=p256dh,
        auth=auth,
        latitude=latitude,
        longitude=longitude,
        radius_km=ensure_positive_radius(radius_km),
        device_info=device_info or {},
    )
    return PushSubscriptionRepository(session).upsert(subscription)
