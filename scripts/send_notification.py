"""Utility script to record a notification and push it from the command line."""

from __future__ import annotations

import argparse
import logging

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.notifications import notify_users
from app.application.use_cases.push_subscriptions.validators import (
    ensure_location_pair,
    ensure_positive_radius,
)
from app.config import get_settings
from app.domain.entities import DispatchRequest
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.notifications import build_push_sender


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for a single dispatch."""

    parser = argparse.ArgumentParser(
        description="Send a FindIt notification to a user or to everyone near a point.",
    )
    parser.add_argument("--user-id", required=True, help="Recipient, or triggering user in geotargeted mode")
    parser.add_argument("--title", required=True, help="Notification title")
    parser.add_argument("--message", required=True, help="Notification body")
    parser.add_argument("--type", default="system", help="Notification type (default: system)")
    parser.add_argument("--related-item-id", default=None, help="Item the notification links to")
    parser.add_argument("--latitude", type=float, default=None, help="Origin latitude for geotargeting")
    parser.add_argument("--longitude", type=float, default=None, help="Origin longitude for geotargeting")
    parser.add_argument("--radius-km", type=float, default=None, help="Radius override in kilometers")
    args = parser.parse_args(argv)
    try:
        args.latitude, args.longitude = ensure_location_pair(args.latitude, args.longitude)
        args.radius_km = ensure_positive_radius(args.radius_km)
    except ValueError as exc:
        parser.error(str(exc))
    return args


def main(argv: list[str] | None = None) -> None:
    """Dispatch one notification using the provided command line arguments."""

    args = parse_args(argv)
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    initialize_database()

    request = DispatchRequest(
        type=args.type,
        user_id=args.user_id,
        title=args.title,
        message=args.message,
        related_item_id=args.related_item_id,
        latitude=args.latitude,
        longitude=args.longitude,
        radius_km=args.radius_km,
    )

    session = SessionLocal()
    try:
        result = notify_users(
            session, request, sender=build_push_sender(settings), settings=settings
        )
    except ValueError as exc:
        raise SystemExit(f"Invalid notification: {exc}") from exc
    except SQLAlchemyError as exc:
        raise SystemExit(f"Could not store the notification: {exc}") from exc
    else:
        print(
            "Notification recorded:\n"
            f"  ID: {result.notification.id}\n"
            f"  Push enabled: {'yes' if settings.push_enabled else 'no'}\n"
            f"  Attempted: {result.attempted}\n"
            f"  Delivered: {result.delivered}\n"
            f"  Removed: {result.removed}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
