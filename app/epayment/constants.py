"""
Constants for e-payment error tracking and outbound API calls.
"""

from __future__ import annotations

from django.db import models


class ErrorType(models.TextChoices):
    """Category tag for error-tracking records."""

    EXCEPTION = "exception", "Exception"


class ErrorMessage(models.TextChoices):
    """Message codes identifying which integration failed."""

    API_ACTIVATE_CODE = "API_ACTIVATE_CODE", "Activation code API"
    API_CANCEL_COURSE = "API_CANCEL_COURSE", "Course cancellation API"
    API_MAGENTO = "API_MAGENTO", "Magento API"
    API_BIFROST = "API_BIFROST", "Bifrost API"
    API_MAROL = "API_MAROL", "Marol API"


JSON_HEADERS = {"Content-Type": "application/json;charset=UTF-8"}
