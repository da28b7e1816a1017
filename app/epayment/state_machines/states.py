"""
State enums for e-payment models.

These are Django TextChoices for database storage and admin integration.
Transactions and activation codes share the same status vocabulary.

EcomTransaction States:
    created → pending → success
    created/pending → failed
    created/pending → timeout (expired by the reconciler)

EcomCode States:
    created → success (course activated)
    any → failed (course cancelled)
"""

from django.db import models


class PaymentStatus(models.TextChoices):
    """
    Statuses for EcomTransaction and EcomCode.

    Terminal states: SUCCESS, FAILED, TIMEOUT

    Expiry Flow:
        CREATED → TIMEOUT
        PENDING → TIMEOUT

    Note:
        PENDING means the customer reached the payment gateway.
        Only PENDING transactions are reported to Bifrost when they expire.
    """

    CREATED = "created", "Created"
    PENDING = "pending", "Pending"
    SUCCESS = "success", "Success"
    FAILED = "failed", "Failed"
    TIMEOUT = "timeout", "Timed Out"


# Statuses a transaction can be expired from
EXPIRABLE_STATUSES = (PaymentStatus.CREATED, PaymentStatus.PENDING)
