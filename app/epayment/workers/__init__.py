"""
Workers for background e-payment processing.

Usage:
    from epayment.workers import (
        expire_single_transaction,
        update_expired_transactions,
    )

    update_expired_transactions.delay()
    expire_single_transaction.delay(str(transaction_id))
"""

from epayment.workers.expiry_worker import (
    expire_single_transaction,
    update_expired_transactions,
)

__all__ = [
    "expire_single_transaction",
    "update_expired_transactions",
]
