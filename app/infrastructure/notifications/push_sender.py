"""Web Push delivery through the browser vendors' push services."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Mapping, Protocol

from pywebpush import WebPushException, webpush

from app.config import Settings

logger = logging.getLogger(__name__)

GONE_STATUS_CODES = frozenset({404, 410})


class PushSendResult(str, Enum):
    """Outcome reported by a :class:`PushSender` for one message."""

    DELIVERED = "delivered"
    GONE = "gone"
    FAILED = "failed"


class PushSender(Protocol):
    """Narrow interface used by the dispatcher to deliver one push message."""

    def send(
        self, endpoint: str, keys: Mapping[str, str], payload: str
    ) -> PushSendResult:
        ...


class WebPushSender:
    """Send VAPID-signed Web Push messages using ``pywebpush``."""

    def __init__(
        self,
        *,
        private_key: str,
        subject: str,
        ttl: int = 86400,
        timeout: float | None = None,
    ) -> None:
        self._private_key = private_key
        self._subject = subject
        self._ttl = ttl
        self._timeout = timeout

    def send(
        self, endpoint: str, keys: Mapping[str, str], payload: str
    ) -> PushSendResult:
        subscription_info = {
            "endpoint": endpoint,
            "keys": {"p256dh": keys["p256dh"], "auth": keys["auth"]},
        }
        try:
            webpush(
                subscription_info=subscription_info,
                data=payload,
                vapid_private_key=self._private_key,
                # pywebpush fills in ``aud`` per endpoint, so never share the dict.
                vapid_claims={"sub": self._subject},
                ttl=self._ttl,
                timeout=self._timeout,
            )
        except WebPushException as exc:
            status_code = _status_code(exc)
            if status_code in GONE_STATUS_CODES:
                logger.info(
                    "Push endpoint reported gone (status %s): %s", status_code, endpoint
                )
                return PushSendResult.GONE
            logger.warning(
                "Push service rejected message (status %s) for %s: %s",
                status_code,
                endpoint,
                exc,
            )
            return PushSendResult.FAILED
        return PushSendResult.DELIVERED


def _status_code(exc: WebPushException) -> int | None:
    response = getattr(exc, "response", None)
    if response is None:
        return None
    return getattr(response, "status_code", None)


def build_push_sender(settings: Settings) -> WebPushSender | None:
    """Return a configured sender, or ``None`` when VAPID keys are missing."""

    if not settings.push_enabled:
        logger.debug("VAPID keys not configured; push delivery disabled")
        return None
    return WebPushSender(
        private_key=settings.vapid_private_key or "",
        subject=settings.vapid_subject,
        ttl=settings.push_ttl_seconds,
        timeout=settings.push_timeout_seconds,
    )


__all__ = [
    "GONE_STATUS_CODES",
    "PushSendResult",
    "PushSender",
    "WebPushSender",
    "build_push_sender",
]
