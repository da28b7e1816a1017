"""
State machine enums and helpers for e-payment models.

This module defines the status enum used by e-payment models with django-fsm.
"""

from epayment.state_machines.states import EXPIRABLE_STATUSES, PaymentStatus

__all__ = [
    "EXPIRABLE_STATUSES",
    "PaymentStatus",
]
