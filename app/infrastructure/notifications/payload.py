"""Serialization helpers for push message bodies."""

from __future__ import annotations

import json


def build_push_payload(
    title: str, message: str, related_item_id: str | None = None
) -> dict[str, str]:
    """Return the JSON body delivered to the service worker."""

    url = f"/browse?highlight={related_item_id}" if related_item_id else "/"
    return {"title": title, "message": message, "url": url}


def encode_push_payload(payload: dict[str, str]) -> str:
    return json.dumps(payload, separators=(",", ":"))


__all__ = ["build_push_payload", "encode_push_payload"]
