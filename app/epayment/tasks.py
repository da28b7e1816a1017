"""
Celery task registry for the e-payment app.

Celery autodiscovery imports ``<app>.tasks``; the task implementations
live in epayment.workers.
"""

from epayment.workers import (  # noqa: F401
    expire_single_transaction,
    update_expired_transactions,
)
