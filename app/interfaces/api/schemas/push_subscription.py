"""Pydantic models for push subscription management."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PushConfigRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    public_key: str = Field(default="", alias="publicKey")


class PushSubscriptionKeys(BaseModel):
    p256dh: str = Field(..., min_length=1)
    auth: str = Field(..., min_length=1)


class PushSubscriptionCreate(BaseModel):
    """Subscription object produced by ``PushManager.subscribe`` plus location."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId", min_length=1, max_length=64)
    endpoint: str = Field(..., min_length=1, max_length=2048)
    keys: PushSubscriptionKeys
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    radius_km: float | None = Field(default=None, alias="radiusKm")
    device_info: dict[str, Any] | None = Field(default=None, alias="deviceInfo")


class PushSubscriptionRead(BaseModel):
    id: str
    user_id: str
    endpoint: str
    latitude: float | None = None
    longitude: float | None = None
    radius_km: float | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "PushConfigRead",
    "PushSubscriptionCreate",
    "PushSubscriptionKeys",
    "PushSubscriptionRead",
]
