"""SQLAlchemy model for browser Web Push subscriptions."""

import uuid

from sqlalchemy import Column, DateTime, Float, JSON, String, Text

from app.infrastructure.database import Base
from app.utils import now_naive_utc


class PushSubscriptionModel(Base):
    """Database representation of a push endpoint registered by a user."""

    __tablename__ = "push_subscriptions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), nullable=False, index=True)
    endpoint = Column(String(2048), nullable=False, unique=True)
    p256dh = Column(Text, nullable=False)
    auth = Column(Text, nullable=False)
    lat = Column(Float, nullable=True)
    lng = Column(Float, nullable=True)
    radius_km = Column(Float, nullable=True)
    device_info = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(), nullable=False, default=now_naive_utc)
    updated_at = Column(DateTime(), nullable=False, default=now_naive_utc, onupdate=now_naive_utc)


__all__ = ["PushSubscriptionModel"]
