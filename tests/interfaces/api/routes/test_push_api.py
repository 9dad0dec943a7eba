"""HTTP tests for push configuration and subscription management."""

from __future__ import annotations

from app.infrastructure.repositories import PushSubscriptionRepository


def _subscription(**overrides):
    body = {
        "userId": "owner",
        "endpoint": "https://fcm.googleapis.com/fcm/send/abc",
        "keys": {"p256dh": "BKey", "auth": "secret"},
        "deviceInfo": {"ua": "pytest"},
    }
    body.update(overrides)
    return body


def test_push_config_exposes_public_key(client):
    response = client.get("/push/config")

    assert response.status_code == 200
    assert response.json() == {"publicKey": "BPublicKey"}


def test_register_subscription_is_an_upsert_on_endpoint(client, session):
    created = client.post("/push/subscriptions", json=_subscription())
    assert created.status_code == 201

    updated = client.post(
        "/push/subscriptions",
        json=_subscription(
            userId="new-owner", latitude=40.4, longitude=-3.7, radiusKm=12
        ),
    )
    assert updated.status_code == 201
    assert updated.json()["id"] == created.json()["id"]

    repository = PushSubscriptionRepository(session)
    assert repository.list_for_user("owner") == []
    (stored,) = repository.list_for_user("new-owner")
    assert stored.latitude == 40.4
    assert stored.longitude == -3.7
    assert stored.radius_km == 12
    assert stored.device_info == {"ua": "pytest"}


def test_register_subscription_rejects_partial_location(client):
    response = client.post("/push/subscriptions", json=_subscription(latitude=40.0))

    assert response.status_code == 400


def test_register_subscription_rejects_non_positive_radius(client):
    response = client.post(
        "/push/subscriptions",
        json=_subscription(latitude=40.0, longitude=-3.0, radiusKm=-1),
    )

    assert response.status_code == 400


def test_remove_subscription(client, session):
    client.post("/push/subscriptions", json=_subscription())

    response = client.delete(
        "/push/subscriptions", params={"endpoint": _subscription()["endpoint"]}
    )
    assert response.status_code == 204
    assert PushSubscriptionRepository(session).list_for_user("owner") == []

    missing = client.delete(
        "/push/subscriptions", params={"endpoint": _subscription()["endpoint"]}
    )
    assert missing.status_code == 404
