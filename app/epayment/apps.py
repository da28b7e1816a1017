"""
E-payment app configuration.
"""

from django.apps import AppConfig


class EpaymentConfig(AppConfig):
    """Configuration for the e-payment application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "epayment"
    verbose_name = "E-Payment"
