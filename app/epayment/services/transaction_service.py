"""
ORM-backed store for EcomTransactions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.services import BaseService

from epayment.models import EcomTransaction

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime


class EcomTransactionService(BaseService):
    """Query and persist EcomTransactions."""

    @classmethod
    def find_transactions_by_status_in(
        cls,
        start_time: datetime,
        end_time: datetime,
        statuses: Iterable[str],
    ) -> list[EcomTransaction]:
        """
        Find transactions last updated in ``[start_time, end_time)``.

        Args:
            start_time: Inclusive lower bound on updated_at
            end_time: Exclusive upper bound on updated_at
            statuses: Statuses to include

        Returns:
            Matching transactions, oldest update first
        """
        statuses = list(statuses)
        transactions = list(
            EcomTransaction.objects.filter(
                status__in=statuses,
                updated_at__gte=start_time,
                updated_at__lt=end_time,
            ).order_by("updated_at")
        )
        cls.get_logger().debug(
            f"Found {len(transactions)} transactions in {statuses} "
            f"between {start_time.isoformat()} and {end_time.isoformat()}"
        )
        return transactions

    @classmethod
    def find_by_id(cls, transaction_id) -> EcomTransaction | None:
        return EcomTransaction.objects.filter(pk=transaction_id).first()

    @classmethod
    def save(cls, transaction: EcomTransaction) -> None:
        transaction.save()
