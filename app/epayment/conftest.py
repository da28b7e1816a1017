"""
Pytest fixtures shared by all e-payment tests.

Fixtures provide transactions in each status and stale timestamps so the
expiry window can be tested against the database.

Usage:
    def test_time_out(pending_transaction):
        pending_transaction.time_out()
        pending_transaction.save()
        assert pending_transaction.status == PaymentStatus.TIMEOUT
"""

from datetime import timedelta

import pytest
from django.utils import timezone

from epayment.state_machines import PaymentStatus
from epayment.tests.factories import EcomCodeFactory, EcomTransactionFactory
from epayment.tests.helpers import set_updated_at


# =============================================================================
# Transaction Status Fixtures
# =============================================================================


@pytest.fixture
def created_transaction(db):
    """Create a transaction the customer never paid for."""
    return EcomTransactionFactory()


@pytest.fixture
def pending_transaction(db):
    """Create a transaction waiting on the payment gateway."""
    return EcomTransactionFactory(status=PaymentStatus.PENDING)


@pytest.fixture
def successful_transaction(db):
    """Create a paid transaction."""
    return EcomTransactionFactory(status=PaymentStatus.SUCCESS)


@pytest.fixture
def failed_transaction(db):
    """Create a transaction the gateway declined."""
    return EcomTransactionFactory(status=PaymentStatus.FAILED)


@pytest.fixture
def timed_out_transaction(db):
    """Create an already expired transaction."""
    return EcomTransactionFactory(
        status=PaymentStatus.TIMEOUT,
        timeout_at=timezone.now(),
    )


# =============================================================================
# Stale Transaction Fixtures
# =============================================================================


@pytest.fixture
def stale_pending_transaction(db):
    """Pending transaction with no activity for an hour, with two codes."""
    transaction = EcomTransactionFactory(status=PaymentStatus.PENDING)
    EcomCodeFactory(transaction=transaction, activate_code="STALE-A")
    EcomCodeFactory(transaction=transaction, activate_code="STALE-B")
    return set_updated_at(transaction, timezone.now() - timedelta(hours=1))
