"""
Test helpers for e-payment tests.
"""

from epayment.models import EcomTransaction


def set_updated_at(transaction, when):
    """
    Force a transaction's updated_at.

    auto_now overwrites updated_at on save(), so go through QuerySet.update().
    """
    EcomTransaction.objects.filter(pk=transaction.pk).update(updated_at=when)
    transaction.refresh_from_db()
    return transaction
