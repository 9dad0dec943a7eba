"""Endpoints for dispatching, reading and streaming notifications."""

from __future__ import annotations

import logging

from fastapi import (
    APIRouter,
    Depends,
    Query,
    Request,
    Response,
    WebSocket,
    WebSocketDisconnect,
    status,
)
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    list_notifications as list_notifications_uc,
    mark_notifications_read as mark_notifications_read_uc,
    notify_users as notify_users_uc,
)
from app.config import Settings
from app.domain.entities import DispatchRequest, Notification
from app.infrastructure.database import get_db
from app.infrastructure.notifications import (
    PushSender,
    notification_manager,
    serialize_notification,
)
from app.interfaces.api.dependencies import get_app_settings, get_push_sender
from app.interfaces.api.schemas import (
    NotificationMarkReadRequest,
    NotificationRead,
    NotifyUsersRequest,
    NotifyUsersResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id or "",
        user_id=notification.user_id,
        type=notification.type,
        title=notification.title,
        message=notification.message,
        related_item_id=notification.related_item_id,
        read=notification.read,
        created_at=notification.created_at,
    )


def _error_response(message: str) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def _format_validation_error(exc: ValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        message = str(error.get("msg", "Invalid value"))
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


@router.post("/notify-users", response_model=NotifyUsersResponse)
async def notify_users(
    request: Request,
    db: Session = Depends(get_db),
    sender: PushSender | None = Depends(get_push_sender),
    settings: Settings = Depends(get_app_settings),
):
    """Record a notification and push it to the matching subscriptions."""

    try:
        body = NotifyUsersRequest.model_validate(await request.json())
    except ValidationError as exc:
        return _error_response(_format_validation_error(exc))
    except ValueError:
        return _error_response("Request body must be a JSON object")

    dispatch_request = DispatchRequest(
        type=body.type,
        user_id=body.user_id,
        title=body.title,
        message=body.message,
        related_item_id=body.related_item_id,
        latitude=body.latitude,
        longitude=body.longitude,
        radius_km=body.radius_km,
    )
    try:
        result = await run_in_threadpool(
            notify_users_uc, db, dispatch_request, sender=sender, settings=settings
        )
    except ValueError as exc:
        return _error_response(str(exc))
    except SQLAlchemyError as exc:
        logger.exception(
            "Failed to record notification for user %s", dispatch_request.user_id
        )
        return _error_response(str(exc.__cause__ or exc))

    return NotifyUsersResponse(
        success=True, notification=_notification_to_schema(result.notification)
    )


@router.get("/users/{user_id}/notifications", response_model=list[NotificationRead])
def list_notifications(
    user_id: str,
    unread_only: bool = Query(default=False),
    limit: int = Query(default=50, ge=1, le=200),
    db: Session = Depends(get_db),
) -> list[NotificationRead]:
    """Return the most recent notifications for ``user_id``."""

    notifications = list_notifications_uc(
        db, user_id, unread_only=unread_only, limit=limit
    )
    return [_notification_to_schema(notification) for notification in notifications]


@router.post(
    "/users/{user_id}/notifications/read",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def mark_notifications_read(
    user_id: str,
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
) -> Response:
    """Mark the given notifications of ``user_id`` as read."""

    mark_notifications_read_uc(db, user_id, payload.unique_ids())
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.websocket("/users/{user_id}/notifications/ws")
async def notifications_websocket(
    websocket: WebSocket,
    user_id: str,
    db: Session = Depends(get_db),
) -> None:
    """Stream notifications recorded for ``user_id`` while the socket is open."""

    try:
        pending_notifications = list_notifications_uc(db, user_id, unread_only=True)
    except SQLAlchemyError:
        logger.exception("Could not load pending notifications for user %s", user_id)
        db.close()
        await websocket.close(code=status.WS_1011_INTERNAL_ERROR)
        return
    # Sockets idle for long periods; hand the connection back in the meantime.
    db.close()

    await notification_manager.connect(user_id, websocket)
    try:
        await websocket.send_json(
            {
                "type": "init",
                "data": [serialize_notification(n) for n in pending_notifications],
            }
        )
        while True:
            try:
                message = await websocket.receive_json()
            except ValueError:
                continue

            if not isinstance(message, dict):
                continue

            message_type = message.get("type")
            if message_type == "ping":
                await websocket.send_json({"type": "pong"})
                continue

            if message_type == "ack":
                ids = message.get("ids", [])
                if isinstance(ids, list) and ids:
                    try:
                        mark_notifications_read_uc(db, user_id, [str(i) for i in ids])
                    finally:
                        db.close()
    except WebSocketDisconnect:
        pass
    finally:
        notification_manager.disconnect(user_id, websocket)
