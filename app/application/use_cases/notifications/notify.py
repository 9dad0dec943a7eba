"""Record a notification and fan it out as Web Push messages."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.config import Settings, get_settings
from app.domain.entities import DispatchRequest, DispatchResult, PushSubscription
from app.infrastructure.notifications import (
    PushSender,
    build_push_payload,
    dispatch_notification,
)

from .dispatch import dispatch_push
from .record import record_notification
from .selection import select_direct, select_geotargeted

logger = logging.getLogger(__name__)


def notify_users(
    session: Session,
    request: DispatchRequest,
    *,
    sender: PushSender | None,
    settings: Settings | None = None,
) -> DispatchResult:
    """Persist the in-app notification, then deliver it best-effort.

    Only a failure to record the notification is raised. The record is sent to
    the user's open websockets, and pushed only when ``sender`` is configured.
    Neither delivery path lets its failures reach the caller.
    """

    settings = settings or get_settings()

    notification = record_notification(
        session,
        user_id=request.user_id,
        notification_type=request.type,
        title=request.title,
        message=request.message,
        related_item_id=request.related_item_id,
    )
    result = DispatchResult(notification=notification)

    try:
        dispatch_notification(notification)
    except Exception:
        logger.exception("Realtime delivery failed for notification %s", notification.id)

    if sender is None:
        return result

    try:
        subscriptions = _select_subscriptions(session, request, settings)
        if not subscriptions:
            logger.debug("No push subscriptions selected for notification %s", notification.id)
            return result
        payload = build_push_payload(
            request.title, request.message, request.related_item_id
        )
        result.outcomes = dispatch_push(
            session,
            sender,
            subscriptions,
            payload,
            max_workers=settings.push_max_workers,
            timeout=settings.push_timeout_seconds,
        )
    except Exception:
        logger.exception("Web Push error for notification %s", notification.id)
        return result

    logger.info(
        "Notification %s pushed: attempted=%s delivered=%s failed=%s removed=%s",
        notification.id,
        result.attempted,
        result.delivered,
        result.failed,
        result.removed,
    )
    return result


def _select_subscriptions(
    session: Session, request: DispatchRequest, settings: Settings
) -> Sequence[PushSubscription]:
    if request.is_geotargeted:
        return select_geotargeted(
            session,
            latitude=request.latitude,
            longitude=request.longitude,
            exclude_user_id=request.user_id,
            radius_km=request.radius_km,
            default_radius_km=settings.default_radius_km,
        )
    return select_direct(session, request.user_id)
