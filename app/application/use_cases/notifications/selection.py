"""Selection of the push subscriptions that should receive a dispatch."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from app.domain.entities import PushSubscription
from app.domain.geo import DEFAULT_RADIUS_KM, is_within_radius
from app.infrastructure.repositories import PushSubscriptionRepository


def select_direct(session: Session, user_id: str) -> Sequence[PushSubscription]:
    """Return every subscription owned by ``user_id``."""

    return PushSubscriptionRepository(session).list_for_user(user_id)


def filter_by_distance(
    subscriptions: Iterable[PushSubscription],
    *,
    latitude: float,
    longitude: float,
    radius_km: float | None = None,
    default_radius_km: float = DEFAULT_RADIUS_KM,
) -> list[PushSubscription]:
    """Keep the located subscriptions lying within their radius of the origin.

    ``radius_km`` overrides each subscription's own radius. The comparison is
    inclusive.
    """

    selected: list[PushSubscription] = []
    for subscription in subscriptions:
        if not subscription.has_location:
            continue
        if radius_km is not None:
            effective_radius = radius_km
        elif subscription.radius_km is not None:
            effective_radius = subscription.radius_km
        else:
            effective_radius = default_radius_km
        if is_within_radius(
            latitude,
            longitude,
            subscription.latitude,
            subscription.longitude,
            effective_radius,
        ):
            selected.append(subscription)
    return selected


def select_geotargeted(
    session: Session,
    *,
    latitude: float,
    longitude: float,
    exclude_user_id: str | None,
    radius_km: float | None = None,
    default_radius_km: float = DEFAULT_RADIUS_KM,
) -> list[PushSubscription]:
    """Return subscriptions of other users located near the origin."""

    candidates = PushSubscriptionRepository(session).list_located(
        exclude_user_id=exclude_user_id
    )
    return filter_by_distance(
        (c for c in candidates if c.user_id != exclude_user_id),
        latitude=latitude,
        longitude=longitude,
        radius_km=radius_km,
        default_radius_km=default_radius_km,
    )
