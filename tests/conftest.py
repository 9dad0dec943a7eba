"""Shared fixtures for the test-suite."""

from __future__ import annotations

import os
import pathlib
import sys
import threading

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Keep the module level engine away from the working directory.
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import reset_settings_cache
from app.domain.entities import PushSubscription
from app.infrastructure.database import initialize_database
from app.infrastructure.notifications import PushSendResult
from app.infrastructure.repositories import PushSubscriptionRepository

reset_settings_cache()


class FakePushSender:
    """Records sends and answers with scripted results per endpoint."""

    def __init__(self) -> None:
        self.results: dict[str, PushSendResult] = {}
        self.errors: dict[str, Exception] = {}
        self.calls: list[tuple[str, dict[str, str], str]] = []
        self._lock = threading.Lock()

    def send(self, endpoint, keys, payload):
        with self._lock:
            self.calls.append((endpoint, dict(keys), payload))
        if endpoint in self.errors:
            raise self.errors[endpoint]
        return self.results.get(endpoint, PushSendResult.DELIVERED)

    @property
    def endpoints(self) -> list[str]:
        return sorted(endpoint for endpoint, _, _ in self.calls)


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    initialize_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def push_sender() -> FakePushSender:
    return FakePushSender()


@pytest.fixture()
def add_subscription(session):
    """Return a helper that stores a push subscription."""

    def _add(
        user_id: str,
        endpoint: str,
        *,
        latitude: float | None = None,
        longitude: float | None = None,
        radius_km: float | None = None,
    ) -> PushSubscription:
        return PushSubscriptionRepository(session).upsert(
            PushSubscription(
                id=None,
                user_id=user_id,
                endpoint=endpoint,
                p256dh=f"p256dh-{endpoint}",
                auth=f"auth-{endpoint}",
                latitude=latitude,
                longitude=longitude,
                radius_km=radius_km,
            )
        )

    return _add
