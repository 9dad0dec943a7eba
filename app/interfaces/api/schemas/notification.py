"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


class NotifyUsersRequest(BaseModel):
    """Body accepted by the notify endpoint.

    Supplying both ``latitude`` and ``longitude`` switches the dispatch to
    geotargeted mode.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    type: str = Field(..., min_length=1, max_length=50)
    user_id: str = Field(..., alias="userId", min_length=1, max_length=64)
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)
    related_item_id: str | None = Field(default=None, alias="relatedItemId", max_length=64)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    radius_km: float | None = Field(default=None, alias="radiusKm", gt=0)

    @model_validator(mode="after")
    def _validate_location_pair(self) -> "NotifyUsersRequest":
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be provided together")
        return self


class NotificationMarkReadRequest(BaseModel):
    """Payload used to mark a batch of notifications as read."""

    ids: list[str] = Field(..., min_length=1, description="Notification identifiers")

    def unique_ids(self) -> list[str]:
        """Return the list of identifiers without duplicates preserving order."""

        return list(dict.fromkeys(self.ids))


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: str
    user_id: str
    type: str
    title: str
    message: str
    related_item_id: str | None = None
    read: bool = False
    created_at: datetime


class NotifyUsersResponse(BaseModel):
    success: bool = True
    notification: NotificationRead


__all__ = [
    "NotificationMarkReadRequest",
    "NotificationRead",
    "NotifyUsersRequest",
    "NotifyUsersResponse",
]
