"""
EcomTransaction model for course purchase payment attempts.

A transaction is created by the checkout flow when a customer starts paying
for a Magento order. The reconciler expires transactions that never reach a
terminal status.

Usage:
    from epayment.models import EcomTransaction
    from epayment.state_machines import PaymentStatus

    transaction = EcomTransaction.objects.get(charge_id="chrg_123")
    if transaction.can_time_out:
        transaction.time_out()
        transaction.save()
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone
from django_fsm import FSMField, can_proceed, transition

from core.model_mixins import UUIDPrimaryKeyMixin
from core.models import BaseModel

from epayment.state_machines import EXPIRABLE_STATUSES, PaymentStatus


class EcomTransaction(UUIDPrimaryKeyMixin, BaseModel):
    """
    A payment attempt for a Magento order.

    Fields:
        charge_id: Payment gateway charge ID (used as event id for Bifrost)
        order_id: Magento order ID
        user_id: Magento customer ID
        status: Current payment status (managed by FSM)
        timeout_at: When the transaction was expired by the reconciler
        contact_method: Payment method, forwarded to Marol when creating contacts

    Note:
        updated_at (from BaseModel) is the "last action" timestamp used to
        decide whether a transaction is stale.
    """

    # ==========================================================================
    # External References
    # ==========================================================================

    charge_id = models.CharField(
        max_length=255,
        db_index=True,
        help_text="Payment gateway charge ID",
    )

    order_id = models.CharField(
        max_length=64,
        db_index=True,
        help_text="Magento order ID",
    )

    user_id = models.CharField(
        max_length=64,
        help_text="Magento customer ID",
    )

    # ==========================================================================
    # State
    # ==========================================================================

    status = FSMField(
        default=PaymentStatus.CREATED,
        choices=PaymentStatus.choices,
        db_index=True,
        help_text="Current payment status (managed by FSM)",
    )

    timeout_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When the transaction was timed out",
    )

    contact_method = models.CharField(
        max_length=50,
        blank=True,
        default="",
        help_text="Payment method chosen by the customer (e.g., 'credit_card')",
    )

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "E-commerce Transaction"
        verbose_name_plural = "E-commerce Transactions"
        indexes = [
            models.Index(
                fields=["status", "updated_at"],
                name="epayment_ec_status_5b8e2f_idx",
            ),
        ]

    def __str__(self) -> str:
        """Return string representation with charge ID and status."""
        return f"EcomTransaction({self.charge_id}, {self.status})"

    @property
    def can_time_out(self) -> bool:
        """Check if the transaction is still in an expirable status."""
        return can_proceed(self.time_out)

    @property
    def is_pending(self) -> bool:
        """Check if the customer reached the payment gateway."""
        return self.status == PaymentStatus.PENDING

    # ==========================================================================
    # State Transitions (django-fsm)
    # ==========================================================================

    @transition(
        field=status,
        source=list(EXPIRABLE_STATUSES),
        target=PaymentStatus.TIMEOUT,
    )
    def time_out(self):
        """
        Expire the transaction.

        Transition: CREATED/PENDING -> TIMEOUT

        Note: Does not save - caller must save after calling.
        """
        self.timeout_at = timezone.now()
