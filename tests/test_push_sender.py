"""Unit tests for the pywebpush-backed sender."""

from __future__ import annotations

import types

import pytest
from pywebpush import WebPushException

from app.config import Settings
from app.infrastructure.notifications import (
    PushSendResult,
    WebPushSender,
    build_push_sender,
)
from app.infrastructure.notifications import push_sender as push_sender_module

KEYS = {"p256dh": "client-public-key", "auth": "client-auth"}


def _sender() -> WebPushSender:
    return WebPushSender(private_key="private", subject="mailto:ops@example.com", ttl=60)


def _raise_with_status(status_code: int):
    def _webpush(**_kwargs):
        response = types.SimpleNamespace(status_code=status_code, text="")
        raise WebPushException(f"Push failed: {status_code}", response=response)

    return _webpush


def test_successful_send_uses_vapid_claims(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: list[dict] = []

    def _webpush(**kwargs):
        captured.append(kwargs)
        return types.SimpleNamespace(status_code=201)

    monkeypatch.setattr(push_sender_module, "webpush", _webpush)

    result = _sender().send("https://push.test/a", KEYS, '{"title":"t"}')

    assert result is PushSendResult.DELIVERED
    (call,) = captured
    assert call["subscription_info"] == {"endpoint": "https://push.test/a", "keys": KEYS}
    assert call["data"] == '{"title":"t"}'
    assert call["vapid_private_key"] == "private"
    assert call["vapid_claims"] == {"sub": "mailto:ops@example.com"}
    assert call["ttl"] == 60


def test_claims_are_not_shared_between_sends(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[dict] = []

    def _webpush(**kwargs):
        kwargs["vapid_claims"]["aud"] = kwargs["subscription_info"]["endpoint"]
        seen.append(kwargs["vapid_claims"])

    monkeypatch.setattr(push_sender_module, "webpush", _webpush)
    sender = _sender()

    sender.send("https://fcm.test/a", KEYS, "{}")
    sender.send("https://mozilla.test/b", KEYS, "{}")

    assert seen[0] is not seen[1]
    assert seen[1]["aud"] == "https://mozilla.test/b"


@pytest.mark.parametrize("status_code", [404, 410])
def test_gone_statuses_are_reported(monkeypatch: pytest.MonkeyPatch, status_code: int) -> None:
    monkeypatch.setattr(push_sender_module, "webpush", _raise_with_status(status_code))

    assert _sender().send("https://push.test/a", KEYS, "{}") is PushSendResult.GONE


@pytest.mark.parametrize("status_code", [400, 413, 429, 500, 503])
def test_other_statuses_are_transient(monkeypatch: pytest.MonkeyPatch, status_code: int) -> None:
    monkeypatch.setattr(push_sender_module, "webpush", _raise_with_status(status_code))

    assert _sender().send("https://push.test/a", KEYS, "{}") is PushSendResult.FAILED


def test_exception_without_response_is_transient(monkeypatch: pytest.MonkeyPatch) -> None:
    def _webpush(**_kwargs):
        raise WebPushException("Push failed")

    monkeypatch.setattr(push_sender_module, "webpush", _webpush)

    assert _sender().send("https://push.test/a", KEYS, "{}") is PushSendResult.FAILED


@pytest.mark.parametrize(
    ("public_key", "private_key"),
    [(None, None), ("public", None), (None, "private"), ("", "private")],
)
def test_build_push_sender_requires_both_keys(public_key, private_key) -> None:
    settings = Settings(
        database_url="sqlite://",
        vapid_public_key=public_key,
        vapid_private_key=private_key,
    )

    assert settings.push_enabled is False
    assert build_push_sender(settings) is None


def test_build_push_sender_with_keys() -> None:
    settings = Settings(
        database_url="sqlite://",
        vapid_public_key="public",
        vapid_private_key="private",
    )

    assert isinstance(build_push_sender(settings), WebPushSender)


def test_configured_sender_bounds_each_request(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: list[dict] = []
    monkeypatch.setattr(push_sender_module, "webpush", lambda **kwargs: captured.append(kwargs))
    settings = Settings(
        database_url="sqlite://",
        vapid_public_key="public",
        vapid_private_key="private",
    )

    build_push_sender(settings).send("https://push.test/a", KEYS, "{}")

    assert settings.push_timeout_seconds == 10.0
    assert captured[0]["timeout"] == 10.0
