"""Persistence helpers for push subscriptions."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import PushSubscription
from app.infrastructure.models import PushSubscriptionModel
from app.utils import ensure_utc


class PushSubscriptionRepository:
    """Provide CRUD operations for :class:`PushSubscription` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: str) -> Sequence[PushSubscription]:
        query = (
            self.session.query(PushSubscriptionModel)
            .filter(PushSubscriptionModel.user_id == user_id)
            .order_by(PushSubscriptionModel.created_at, PushSubscriptionModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_located(
        self, *, exclude_user_id: str | None = None
    ) -> Sequence[PushSubscription]:
        """Return subscriptions with both coordinates set."""

        query = self.session.query(PushSubscriptionModel).filter(
            PushSubscriptionModel.lat.is_not(None),
            PushSubscriptionModel.lng.is_not(None),
        )
        if exclude_user_id is not None:
            query = query.filter(PushSubscriptionModel.user_id != exclude_user_id)
        return [self._to_entity(model) for model in query.all()]

    def upsert(self, subscription: PushSubscription) -> PushSubscription:
        """Insert ``subscription`` or update the row sharing its endpoint."""

        model = self._get_model_by_endpoint(subscription.endpoint)
        if model is None:
            model = PushSubscriptionModel(endpoint=subscription.endpoint)
            self.session.add(model)
        model.user_id = subscription.user_id
        model.p256dh = subscription.p256dh
        model.auth = subscription.auth
        model.lat = subscription.latitude
        model.lng = subscription.longitude
        model.radius_km = subscription.radius_km
        model.device_info = subscription.device_info or {}
        self._commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, subscription_id: str) -> bool:
        deleted = (
            self.session.query(PushSubscriptionModel)
            .filter(PushSubscriptionModel.id == subscription_id)
            .delete(synchronize_session=False)
        )
        self._commit()
        return deleted > 0

    def delete_by_endpoint(self, endpoint: str) -> bool:
        deleted = (
            self.session.query(PushSubscriptionModel)
            .filter(PushSubscriptionModel.endpoint == endpoint)
            .delete(synchronize_session=False)
        )
        self._commit()
        return deleted > 0

    def _get_model_by_endpoint(self, endpoint: str) -> PushSubscriptionModel | None:
        return (
            self.session.query(PushSubscriptionModel)
            .filter(PushSubscriptionModel.endpoint == endpoint)
            .one_or_none()
        )

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    @staticmethod
    def _to_entity(model: PushSubscriptionModel) -> PushSubscription:
        return PushSubscription(
            id=model.id,
            user_id=model.user_id,
            endpoint=model.endpoint,
            p256dh=model.p256dh,
            auth=model.auth,
            latitude=model.lat,
            longitude=model.lng,
            radius_km=model.radius_km,
            device_info=model.device_info or {},
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )


__all__ = ["PushSubscriptionRepository"]
