"""
Reusable model mixins.

Mixins:
    UUIDPrimaryKeyMixin: UUID primary key instead of an auto-increment integer

Usage:
    from core.model_mixins import UUIDPrimaryKeyMixin
    from core.models import BaseModel

    class EcomCode(UUIDPrimaryKeyMixin, BaseModel):
        activate_code = models.CharField(max_length=64)

Note:
    Always list mixins before BaseModel in inheritance.
"""

from __future__ import annotations

import uuid

from django.db import models


class UUIDPrimaryKeyMixin(models.Model):
    """
    Use a UUID as primary key.

    Transaction ids travel to the marketplace and the contact sync service,
    so they must not reveal record counts or ordering.

    Fields:
        id: UUIDField primary key (auto-generated)
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for this record",
    )

    class Meta:
        abstract = True
