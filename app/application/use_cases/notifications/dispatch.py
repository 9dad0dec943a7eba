"""Best-effort Web Push fan-out with cleanup of dead endpoints."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor, wait

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import DeliveryOutcome, DeliveryStatus, PushSubscription
from app.infrastructure.notifications import (
    PushSender,
    PushSendResult,
    encode_push_payload,
)
from app.infrastructure.repositories import PushSubscriptionRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


def dispatch_push(
    session: Session,
    sender: PushSender,
    subscriptions: Sequence[PushSubscription],
    payload: dict[str, str],
    *,
    max_workers: int = DEFAULT_MAX_WORKERS,
    timeout: float | None = None,
) -> list[DeliveryOutcome]:
    """Deliver ``payload`` to every subscription independently.

    Sends run on a bounded thread pool. Deletions of gone subscriptions happen
    on the calling thread because ``session`` is not thread-safe. Nothing
    raised by an individual send escapes this function.
    """

    if not subscriptions:
        return []

    body = encode_push_payload(payload)
    repository = PushSubscriptionRepository(session)
    outcomes: list[DeliveryOutcome] = []

    executor = ThreadPoolExecutor(
        max_workers=max(1, min(max_workers, len(subscriptions))),
        thread_name_prefix="push",
    )
    try:
        futures: dict[Future[PushSendResult], PushSubscription] = {
            executor.submit(sender.send, s.endpoint, s.keys, body): s
            for s in subscriptions
        }
        done, _ = wait(futures, timeout=timeout)
        for future, subscription in futures.items():
            if future not in done:
                future.cancel()
                logger.warning(
                    "Push delivery to subscription %s abandoned after timeout",
                    subscription.id,
                )
                outcomes.append(_outcome(subscription, DeliveryStatus.FAILED_TRANSIENT))
                continue
            outcomes.append(_resolve(repository, subscription, future))
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    return outcomes


def _resolve(
    repository: PushSubscriptionRepository,
    subscription: PushSubscription,
    future: Future[PushSendResult],
) -> DeliveryOutcome:
    error = future.exception()
    if error is not None:
        logger.error(
            "Push send error for subscription %s",
            subscription.id,
            exc_info=(type(error), error, error.__traceback__),
        )
        return _outcome(subscription, DeliveryStatus.FAILED_TRANSIENT)

    result = future.result()
    if result is PushSendResult.DELIVERED:
        return _outcome(subscription, DeliveryStatus.DELIVERED)
    if result is PushSendResult.GONE:
        removed = _remove_subscription(repository, subscription)
        return _outcome(subscription, DeliveryStatus.FAILED_PERMANENT, removed=removed)
    return _outcome(subscription, DeliveryStatus.FAILED_TRANSIENT)


def _remove_subscription(
    repository: PushSubscriptionRepository, subscription: PushSubscription
) -> bool:
    try:
        if subscription.id is not None:
            removed = repository.delete(subscription.id)
        else:
            removed = repository.delete_by_endpoint(subscription.endpoint)
    except SQLAlchemyError:
        logger.exception(
            "Failed to remove gone push subscription %s", subscription.id
        )
        return False
    if removed:
        logger.info("Removed gone push subscription %s", subscription.id)
    return removed


def _outcome(
    subscription: PushSubscription, status: DeliveryStatus, *, removed: bool = False
) -> DeliveryOutcome:
    return DeliveryOutcome(
        subscription_id=subscription.id,
        endpoint=subscription.endpoint,
        status=status,
        removed=removed,
    )
