"""
Expiry worker for stale e-commerce transactions.

Tasks:
- update_expired_transactions: Periodic task that expires stale transactions
- expire_single_transaction: On-demand expiry of one transaction

Usage:
    # Typically called via celery-beat (see migration 0002)
    from epayment.workers import update_expired_transactions

    update_expired_transactions.delay()

    # Expire one stuck transaction
    expire_single_transaction.delay(str(transaction_id))

Celery Beat Schedule:
    Interval of 15 minutes, created by
    epayment/migrations/0002_add_expired_transactions_schedule.py
"""

from __future__ import annotations

import logging
from uuid import UUID

from celery import shared_task

from epayment.exceptions import LockAcquisitionError
from epayment.locks import DistributedLock

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

EXPIRY_LOCK_KEY = "epayment:expired-transactions"

# A crashed worker blocks at most two beat ticks
EXPIRY_LOCK_TTL_SECONDS = 30 * 60


# =============================================================================
# Periodic Task
# =============================================================================


@shared_task(bind=True)
def update_expired_transactions(self) -> dict:
    """
    Expire transactions stuck in created/pending.

    Runs every 15 minutes via celery-beat. A run that starts while the
    previous one is still going is skipped.

    Returns:
        Dict with:
        - status: "completed", "skipped" (lock held), or "failed"
        - window_start / window_end: ISO timestamps of the scanned window
        - transactions_found: Number of stale transactions
        - transactions_processed: Number fully processed
        - error: Error message if failed
    """
    from epayment.services import ExpiredTransactionReconciler

    try:
        with DistributedLock(
            EXPIRY_LOCK_KEY, ttl=EXPIRY_LOCK_TTL_SECONDS, blocking=False
        ) as lock:
            result = ExpiredTransactionReconciler().update_expired_transactions(
                heartbeat=lock.extend
            )
    except LockAcquisitionError:
        logger.info(
            "Expired transaction run skipped - another run in progress",
            extra={"task_id": self.request.id},
        )
        return {
            "status": "skipped",
            "reason": "Another expired transaction run is in progress",
        }

    if result.success:
        return {"status": "completed", **result.data.to_dict()}

    return {
        "status": "failed",
        **(result.data.to_dict() if result.data else {}),
        "error": result.error,
        "error_code": result.error_code,
    }


# =============================================================================
# On-Demand Task
# =============================================================================


@shared_task(bind=True)
def expire_single_transaction(self, transaction_id: str) -> dict:
    """
    Expire one transaction now, ignoring the time window.

    Args:
        transaction_id: UUID of the EcomTransaction

    Returns:
        Dict with:
        - status: "expired", "not_found", "invalid_state" or "failed"
        - transaction_id: The ID processed
        - details of each workflow step when expired
    """
    from epayment.services import ExpiredTransactionReconciler

    logger.info(
        "Expiring single transaction",
        extra={"transaction_id": transaction_id},
    )

    try:
        transaction_uuid = UUID(transaction_id)
    except ValueError:
        logger.error(f"Invalid transaction_id format: {transaction_id}")
        return {
            "status": "failed",
            "transaction_id": transaction_id,
            "error": "Invalid UUID format",
        }

    try:
        result = ExpiredTransactionReconciler().expire_transaction(transaction_uuid)
    except Exception as e:
        logger.exception(
            f"Error expiring transaction: {e}",
            extra={"transaction_id": transaction_id},
        )
        return {
            "status": "failed",
            "transaction_id": transaction_id,
            "error": str(e),
            "error_code": "UNEXPECTED_ERROR",
        }

    if not result.success:
        status = {
            "TRANSACTION_NOT_FOUND": "not_found",
            "INVALID_STATE": "invalid_state",
        }.get(result.error_code, "failed")
        return {
            "status": status,
            "transaction_id": transaction_id,
            "error": result.error,
            "error_code": result.error_code,
        }

    return {"status": "expired", **result.data.to_dict()}


__all__ = [
    "expire_single_transaction",
    "update_expired_transactions",
]
