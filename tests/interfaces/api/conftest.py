"""Fixtures for exercising the HTTP API."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from app.config import Settings
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_app_settings, get_push_sender


@pytest.fixture()
def api_settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        vapid_public_key="BPublicKey",
        vapid_private_key="private",
    )


@pytest.fixture()
def push_enabled() -> bool:
    return True


@pytest.fixture()
def client(session_factory, api_settings, push_sender, push_enabled):
    """Return a test client bound to the in-memory database and fake sender."""

    from main import create_app

    app = create_app()

    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_app_settings] = lambda: api_settings
    app.dependency_overrides[get_push_sender] = lambda: push_sender if push_enabled else None

    with TestClient(app) as test_client:
        yield test_client
