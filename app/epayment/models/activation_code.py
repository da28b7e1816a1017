"""
EcomCode model for course activation codes.

Each paid course in an order gets an activation code. When the transaction
expires, the course service is asked to cancel the code and its enrollment.
"""

from __future__ import annotations

from django.db import models

from core.model_mixins import UUIDPrimaryKeyMixin
from core.models import BaseModel

from epayment.state_machines import PaymentStatus


class EcomCode(UUIDPrimaryKeyMixin, BaseModel):
    """
    Course activation code issued for a transaction.

    Fields:
        transaction: The EcomTransaction the code was issued for
        activate_code: Code sent to the course service (``cod_code``)
        status: Code status, FAILED once the course service cancelled it
    """

    transaction = models.ForeignKey(
        "epayment.EcomTransaction",
        on_delete=models.CASCADE,
        related_name="codes",
        help_text="Transaction this code was issued for",
    )

    activate_code = models.CharField(
        max_length=64,
        unique=True,
        help_text="Activation code known to the course service",
    )

    status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.CREATED,
        db_index=True,
        help_text="Current code status",
    )

    class Meta:
        ordering = ["created_at"]
        verbose_name = "Activation Code"
        verbose_name_plural = "Activation Codes"

    def __str__(self) -> str:
        return f"EcomCode({self.activate_code}, {self.status})"

    def mark_failed(self) -> None:
        """
        Mark the code as cancelled by the course service.

        Note: Does not save - caller must save after calling.
        """
        self.status = PaymentStatus.FAILED
