"""
E-payment services.

This module provides:
- EcomTransactionService: ORM store for transactions
- EcomCodeService: ORM store for activation codes
- ExpiredTransactionReconciler: Times out stale transactions

Usage:
    from epayment.services import ExpiredTransactionReconciler

    result = ExpiredTransactionReconciler().update_expired_transactions()
"""

from epayment.services.code_service import EcomCodeService
from epayment.services.expiry_service import (
    ExpiredTransactionReconciler,
    ExpiryRunResult,
    TransactionExpiryResult,
)
from epayment.services.transaction_service import EcomTransactionService

__all__ = [
    "EcomCodeService",
    "EcomTransactionService",
    "ExpiredTransactionReconciler",
    "ExpiryRunResult",
    "TransactionExpiryResult",
]
