"""
IntegrationErrorLog model for error tracking.

Rows are appended by ``epayment.error_tracking.ErrorLogger`` whenever an
integration call fails in a way the workflow tolerates, so operators can
inspect and alert on them later.
"""

from __future__ import annotations

from django.db import models

from core.model_mixins import UUIDPrimaryKeyMixin
from core.models import BaseModel

from epayment.constants import ErrorMessage, ErrorType


class IntegrationErrorLog(UUIDPrimaryKeyMixin, BaseModel):
    """
    A tracked integration failure.

    Fields:
        error_type: Category tag (e.g., EXCEPTION)
        message_code: Which integration failed (e.g., API_ACTIVATE_CODE)
        exception_class: Class name of the captured exception
        message: Exception message
        context: Identifiers useful for follow-up (charge id, code, ...)
    """

    error_type = models.CharField(
        max_length=20,
        choices=ErrorType.choices,
        db_index=True,
    )

    message_code = models.CharField(
        max_length=50,
        choices=ErrorMessage.choices,
        db_index=True,
    )

    exception_class = models.CharField(max_length=255, blank=True, default="")

    message = models.TextField(blank=True, default="")

    context = models.JSONField(default=dict, blank=True)

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "Integration Error"
        verbose_name_plural = "Integration Errors"
        indexes = [
            models.Index(
                fields=["message_code", "created_at"],
                name="epayment_in_message_9c41d7_idx",
            ),
        ]

    def __str__(self) -> str:
        return f"IntegrationErrorLog({self.error_type}, {self.message_code})"
