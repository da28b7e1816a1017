"""
ORM-backed store for activation codes.
"""

from __future__ import annotations

from core.services import BaseService

from epayment.models import EcomCode, EcomTransaction


class EcomCodeService(BaseService):
    """Query and persist EcomCodes."""

    @classmethod
    def find_by_transaction_id(cls, transaction_id) -> list[EcomCode] | None:
        """
        Get the activation codes issued for a transaction.

        Returns:
            The codes (possibly empty), or None if no such transaction exists
        """
        if not EcomTransaction.objects.filter(pk=transaction_id).exists():
            cls.get_logger().debug(f"No transaction {transaction_id}, codes unavailable")
            return None
        return list(EcomCode.objects.filter(transaction_id=transaction_id))

    @classmethod
    def save(cls, code: EcomCode) -> None:
        code.save()
