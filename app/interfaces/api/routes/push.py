"""Endpoints for Web Push configuration and subscriptions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from app.application.use_cases.push_subscriptions import (
    register_subscription as register_subscription_uc,
    remove_subscription as remove_subscription_uc,
)
from app.config import Settings
from app.domain.entities import PushSubscription
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_app_settings
from app.interfaces.api.schemas import (
    PushConfigRead,
    PushSubscriptionCreate,
    PushSubscriptionRead,
)

router = APIRouter(prefix="/push", tags=["push"])


def _subscription_to_schema(subscription: PushSubscription) -> PushSubscriptionRead:
    return PushSubscriptionRead(
        id=subscription.id or "",
        user_id=subscription.user_id,
        endpoint=subscription.endpoint,
        latitude=subscription.latitude,
        longitude=subscription.longitude,
        radius_km=subscription.radius_km,
        created_at=subscription.created_at,
        updated_at=subscription.updated_at,
    )


@router.get("/config", response_model=PushConfigRead, response_model_by_alias=True)
def get_push_config(settings: Settings = Depends(get_app_settings)) -> PushConfigRead:
    """Expose the public VAPID key browsers need to subscribe."""

    return PushConfigRead(public_key=settings.vapid_public_key or "")


@router.post(
    "/subscriptions",
    response_model=PushSubscriptionRead,
    status_code=status.HTTP_201_CREATED,
)
def register_subscription(
    payload: PushSubscriptionCreate,
    db: Session = Depends(get_db),
) -> PushSubscriptionRead:
    """Create or refresh a push subscription keyed on its endpoint."""

    try:
        subscription = register_subscription_uc(
            db,
            user_id=payload.user_id,
            endpoint=payload.endpoint,
            p256dh=payload.keys.p256dh,
            auth=payload.keys.auth,
            latitude=payload.latitude,
            longitude=payload.longitude,
            radius_km=payload.radius_km,
            device_info=payload.device_info,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _subscription_to_schema(subscription)


@router.delete(
    "/subscriptions",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def remove_subscription(
    endpoint: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
) -> Response:
    """Delete the subscription registered for ``endpoint``."""

    try:
        remove_subscription_uc(db, endpoint)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
