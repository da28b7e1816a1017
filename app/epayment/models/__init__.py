"""
E-payment domain models.

This module contains all e-payment models:
- EcomTransaction: A payment attempt for a Magento order
- EcomCode: Course activation codes issued for a transaction
- IntegrationErrorLog: Tracked integration failures
"""

from epayment.models.activation_code import EcomCode
from epayment.models.integration_error import IntegrationErrorLog
from epayment.models.transaction import EcomTransaction

__all__ = [
    "EcomCode",
    "EcomTransaction",
    "IntegrationErrorLog",
]
