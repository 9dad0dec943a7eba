"""SQLAlchemy model for persisted notifications."""

import uuid

from sqlalchemy import Boolean, Column, DateTime, String, Text

from app.infrastructure.database import Base
from app.utils import now_naive_utc


class NotificationModel(Base):
    """Database representation for in-app notifications."""

    __tablename__ = "notifications"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(64), nullable=False, index=True)
    type = Column(String(50), nullable=False)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    related_item_id = Column(String(64), nullable=True)
    read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(), nullable=False, default=now_naive_utc, index=True)


__all__ = ["NotificationModel"]
