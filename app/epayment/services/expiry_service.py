"""
Expired transaction reconciliation.

Customers who open a checkout and walk away leave transactions in CREATED or
PENDING forever. This service times them out and propagates the outcome to
every system that saw the purchase start.

Workflow per transaction:
    1. Transition to TIMEOUT and save
    2. Ask the course service to cancel each activation code
    3. Report the failure to Bifrost (PENDING transactions only)
    4. Create a timed-out C3 contact in Marol for each course in the order

Error handling:
    - A RecoverableError while cancelling one code is sent to error tracking
      and the next code is attempted
    - Anything else aborts the run; transactions already saved stay timed out
      and the rest are picked up by the next run

Usage:
    from epayment.services import ExpiredTransactionReconciler

    result = ExpiredTransactionReconciler().update_expired_transactions()
    if result.success:
        print(result.data.transactions_processed)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

from django.conf import settings
from django.utils import timezone

from core.services import ServiceResult

from epayment.constants import JSON_HEADERS, ErrorMessage, ErrorType
from epayment.error_tracking import ErrorLogger
from epayment.exceptions import RecoverableError
from epayment.state_machines import EXPIRABLE_STATUSES, PaymentStatus
from epayment.types import FailureEvent

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime
    from typing import Any

    from epayment.models import EcomCode, EcomTransaction
    from epayment.protocols import (
        CodeStore,
        ContactImporter,
        ContactSyncClient,
        HttpExecutor,
        MarketplaceClient,
        TransactionStore,
    )
    from epayment.types import OrderSnapshot, UserSnapshot

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

DEFAULT_GRACE_MINUTES = 45
DEFAULT_LOOKBACK_HOURS = 24


# =============================================================================
# Result Types
# =============================================================================


@dataclass
class ExpiryRunResult:
    """Summary of one scan."""

    window_start: datetime
    window_end: datetime
    transactions_found: int = 0
    transactions_processed: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "window_start": self.window_start.isoformat(),
            "window_end": self.window_end.isoformat(),
            "transactions_found": self.transactions_found,
            "transactions_processed": self.transactions_processed,
        }


@dataclass
class TransactionExpiryResult:
    """
    What happened to one expired transaction.

    Attributes:
        stopped_at: Set when the workflow stopped early
            ("codes_missing", "order_missing" or "user_missing")
    """

    transaction_id: str
    charge_id: str
    original_status: str
    codes_cancelled: int = 0
    codes_unchanged: int = 0
    codes_errored: int = 0
    bifrost_notified: bool = False
    contacts_created: int = 0
    stopped_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "transaction_id": self.transaction_id,
            "charge_id": self.charge_id,
            "original_status": self.original_status,
            "codes_cancelled": self.codes_cancelled,
            "codes_unchanged": self.codes_unchanged,
            "codes_errored": self.codes_errored,
            "bifrost_notified": self.bifrost_notified,
            "contacts_created": self.contacts_created,
            "stopped_at": self.stopped_at,
        }


# =============================================================================
# Reconciler
# =============================================================================


class ExpiredTransactionReconciler:
    """
    Times out stale transactions and notifies downstream systems.

    All collaborators are injectable; defaults are built from settings.

    Args:
        transaction_store: TransactionStore (default: EcomTransactionService)
        code_store: CodeStore (default: EcomCodeService)
        http: HttpExecutor used for course cancellation (default: HttpService)
        sync_contact: ContactSyncClient (default: SyncContactService)
        marketplace: MarketplaceClient (default: MagentoService)
        contact_importer: ContactImporter (default: MarolService)
        error_logger: Error-tracking sink (default: ErrorLogger)
        cancel_course_url: Course cancellation endpoint
            (default: settings.CANCEL_COURSE_URL)
        grace_period: Inactivity before a transaction expires (default: 45 min)
        lookback: How far before the grace period to look (default: 24 h)
    """

    def __init__(
        self,
        transaction_store: TransactionStore | None = None,
        code_store: CodeStore | None = None,
        http: HttpExecutor | None = None,
        sync_contact: ContactSyncClient | None = None,
        marketplace: MarketplaceClient | None = None,
        contact_importer: ContactImporter | None = None,
        error_logger: Any = None,
        cancel_course_url: str | None = None,
        grace_period: timedelta | None = None,
        lookback: timedelta | None = None,
    ) -> None:
        from epayment.clients import (
            HttpService,
            MagentoService,
            MarolService,
            SyncContactService,
        )
        from epayment.services.code_service import EcomCodeService
        from epayment.services.transaction_service import EcomTransactionService

        self._transactions = transaction_store or EcomTransactionService()
        self._codes = code_store or EcomCodeService()
        self._http = http or HttpService()
        self._sync_contact = sync_contact or SyncContactService()
        self._marketplace = marketplace or MagentoService()
        self._contact_importer = contact_importer or MarolService()
        self._error_logger = error_logger or ErrorLogger
        self._cancel_course_url = (
            cancel_course_url
            if cancel_course_url is not None
            else settings.CANCEL_COURSE_URL
        )
        self._grace_period = grace_period or timedelta(
            minutes=getattr(
                settings, "EXPIRED_TRANSACTION_GRACE_MINUTES", DEFAULT_GRACE_MINUTES
            )
        )
        self._lookback = lookback or timedelta(
            hours=getattr(
                settings, "EXPIRED_TRANSACTION_LOOKBACK_HOURS", DEFAULT_LOOKBACK_HOURS
            )
        )

    # =========================================================================
    # Scan
    # =========================================================================

    def expiry_window(self, now: datetime | None = None) -> tuple[datetime, datetime]:
        """
        Compute the half-open ``[start, end)`` window of stale updates.

        With the defaults: ``[now - 24h45m, now - 45m)``.
        """
        now = now or timezone.now()
        end_time = now - self._grace_period
        start_time = end_time - self._lookback
        return start_time, end_time

    def update_expired_transactions(
        self, heartbeat: Callable[[], Any] | None = None
    ) -> ServiceResult[ExpiryRunResult]:
        """
        Expire every stale transaction in the window.

        Never raises. An unexpected error stops the run and is returned as
        a failed ServiceResult whose data still carries the partial counts.

        Args:
            heartbeat: Called after each processed transaction; the worker
                uses it to keep its run lock alive
        """
        start_time, end_time = self.expiry_window()
        run = ExpiryRunResult(window_start=start_time, window_end=end_time)

        try:
            logger.info(
                "(update_expired_transactions) START",
                extra={
                    "start_update_time": start_time.isoformat(),
                    "end_update_time": end_time.isoformat(),
                },
            )

            transactions = self._transactions.find_transactions_by_status_in(
                start_time, end_time, EXPIRABLE_STATUSES
            )
            run.transactions_found = len(transactions)
            logger.info(
                "(update_expired_transactions) transactions found",
                extra={"number_transaction": run.transactions_found},
            )

            for transaction in transactions:
                self.sync_expired_transaction(transaction)
                run.transactions_processed += 1
                if heartbeat is not None:
                    heartbeat()

            logger.info(
                "(update_expired_transactions) END",
                extra=run.to_dict(),
            )
            return ServiceResult.success(run)

        except Exception as e:
            logger.error(
                f"(update_expired_transactions) EX: {e}",
                extra={**run.to_dict(), "error": str(e)},
                exc_info=True,
            )
            return ServiceResult.from_exception(
                e, error_code="UNEXPECTED_ERROR", data=run
            )

    # =========================================================================
    # Per-Transaction Workflow
    # =========================================================================

    def sync_expired_transaction(
        self, transaction: EcomTransaction
    ) -> TransactionExpiryResult:
        """
        Run the four-step expiry workflow for one transaction.

        Raises:
            TransitionNotAllowed: If the transaction is no longer expirable
            Exception: Any store or client failure other than a
                RecoverableError while cancelling a code
        """
        logger.info(
            "(sync_expired_transaction) START",
            extra={"charge_id": transaction.charge_id},
        )

        original_status = transaction.status
        was_pending = transaction.is_pending
        outcome = TransactionExpiryResult(
            transaction_id=str(transaction.id),
            charge_id=transaction.charge_id,
            original_status=str(original_status),
        )

        # Step 1: time out the transaction
        transaction.time_out()
        self._transactions.save(transaction)

        # Step 2: cancel activation codes and courses
        codes = self._codes.find_by_transaction_id(transaction.id)
        if codes is None:
            logger.info(
                "ERROR_ECOM_CODE_NULL",
                extra={"ecom_transaction_id": str(transaction.id)},
            )
            outcome.stopped_at = "codes_missing"
            return outcome

        for code in codes:
            self._cancel_code(code, transaction, outcome)

        # Step 3: report the failure to Bifrost
        if was_pending:
            self._sync_contact.update_transaction_bifrost(
                FailureEvent(id=transaction.charge_id, status=PaymentStatus.FAILED.value)
            )
            outcome.bifrost_notified = True

        # Step 4: create Marol C3 contacts
        order = self._marketplace.find_order_by_id(transaction.order_id)
        if order is None:
            logger.error(
                "etl_internal_error= ERROR_CANNOT_GET_ORDER_MAGENTO",
                extra={
                    "order_id": transaction.order_id,
                    "charge_id": transaction.charge_id,
                },
            )
            outcome.stopped_at = "order_missing"
            return outcome

        user = self._marketplace.find_user_by_id(transaction.user_id)
        if user is None:
            logger.error(
                "etl_internal_error= ERROR_CANNOT_GET_USER_MAGENTO",
                extra={
                    "user_id": transaction.user_id,
                    "charge_id": transaction.charge_id,
                },
            )
            outcome.stopped_at = "user_missing"
            return outcome

        if user.has_phone:
            outcome.contacts_created = self._create_c3_contacts(
                order, user, transaction.contact_method
            )

        logger.info(
            "(sync_expired_transaction) END",
            extra=outcome.to_dict(),
        )
        return outcome

    def _cancel_code(
        self,
        code: EcomCode,
        transaction: EcomTransaction,
        outcome: TransactionExpiryResult,
    ) -> None:
        """Cancel one code; only a 200 answer marks it failed."""
        try:
            result = self._http.execute(
                self._cancel_course_url,
                dict(JSON_HEADERS),
                {"cod_code": code.activate_code},
                "POST",
                ErrorMessage.API_CANCEL_COURSE,
            )

            if result.status_code == 200:
                code.mark_failed()
                outcome.codes_cancelled += 1
            else:
                outcome.codes_unchanged += 1
            self._codes.save(code)

        except RecoverableError as e:
            outcome.codes_errored += 1
            self._error_logger.push_exception(
                ErrorType.EXCEPTION,
                ErrorMessage.API_ACTIVATE_CODE,
                e,
                context={
                    "charge_id": transaction.charge_id,
                    "activate_code": code.activate_code,
                },
            )

    def _create_c3_contacts(
        self,
        order: OrderSnapshot,
        user: UserSnapshot,
        method: str,
    ) -> int:
        """
        Create a C3 contact per course, then mark it timed out in Marol.

        Returns:
            Number of contacts created
        """
        expired_event = FailureEvent(id="", status=PaymentStatus.TIMEOUT.value)

        created = 0
        for course_item in order.courses:
            contact_id = self._contact_importer.import_contact_c3(
                user, course_item, method
            )
            self._sync_contact.update_c3_status_in_marol(contact_id, expired_event)
            created += 1
        return created

    # =========================================================================
    # On-Demand
    # =========================================================================

    def expire_transaction(
        self, transaction_id: Any
    ) -> ServiceResult[TransactionExpiryResult]:
        """
        Expire a single transaction regardless of the time window.

        Returns:
            ServiceResult with the TransactionExpiryResult, or a failure with
            error_code TRANSACTION_NOT_FOUND / INVALID_STATE

        Raises:
            Exception: Unexpected store or client failures (see
                sync_expired_transaction)
        """
        transaction = self._transactions.find_by_id(transaction_id)
        if transaction is None:
            return ServiceResult.failure(
                f"EcomTransaction {transaction_id} not found",
                error_code="TRANSACTION_NOT_FOUND",
            )

        if not transaction.can_time_out:
            return ServiceResult.failure(
                f"Cannot time out transaction in '{transaction.status}' status",
                error_code="INVALID_STATE",
            )

        return ServiceResult.success(self.sync_expired_transaction(transaction))


__all__ = [
    "ExpiredTransactionReconciler",
    "ExpiryRunResult",
    "TransactionExpiryResult",
]
