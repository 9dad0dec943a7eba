"""FastAPI dependency utilities."""

from fastapi import Depends

from app.config import Settings, get_settings
from app.infrastructure.notifications import PushSender, build_push_sender


def get_app_settings() -> Settings:
    """Return the cached application settings."""

    return get_settings()


def get_push_sender(settings: Settings = Depends(get_app_settings)) -> PushSender | None:
    """Return the Web Push sender, or ``None`` when push is disabled."""

    return build_push_sender(settings)
