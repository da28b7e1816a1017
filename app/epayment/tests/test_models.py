"""
Tests for e-payment models.

Tests model defaults, properties, and string representations.
"""

import pytest

from epayment.models import EcomCode, IntegrationErrorLog
from epayment.state_machines import PaymentStatus
from epayment.tests.factories import (
    EcomCodeFactory,
    EcomTransactionFactory,
    IntegrationErrorLogFactory,
)


class TestEcomTransaction:
    """Tests for EcomTransaction model."""

    def test_create_transaction(self, db):
        """Should create a transaction with default status."""
        transaction = EcomTransactionFactory()

        assert transaction.id is not None
        assert transaction.status == PaymentStatus.CREATED
        assert transaction.timeout_at is None
        assert transaction.created_at is not None
        assert transaction.updated_at is not None

    def test_str_representation(self, db):
        """Should include charge id and status."""
        transaction = EcomTransactionFactory(charge_id="chrg_abc")

        assert str(transaction) == "EcomTransaction(chrg_abc, created)"

    def test_is_pending(self, db, pending_transaction, created_transaction):
        """Should only be pending in PENDING status."""
        assert pending_transaction.is_pending is True
        assert created_transaction.is_pending is False

    @pytest.mark.parametrize(
        "status,expected",
        [
            (PaymentStatus.CREATED, True),
            (PaymentStatus.PENDING, True),
            (PaymentStatus.SUCCESS, False),
            (PaymentStatus.FAILED, False),
            (PaymentStatus.TIMEOUT, False),
        ],
    )
    def test_can_time_out(self, db, status, expected):
        """Only created and pending transactions can expire."""
        transaction = EcomTransactionFactory(status=status)

        assert transaction.can_time_out is expected

    def test_save_refreshes_updated_at(self, db, created_transaction):
        """Saving should move the last-activity timestamp forward."""
        before = created_transaction.updated_at

        created_transaction.contact_method = "bank_transfer"
        created_transaction.save()

        assert created_transaction.updated_at >= before


class TestEcomCode:
    """Tests for EcomCode model."""

    def test_create_code(self, db):
        """Should create a code linked to its transaction."""
        code = EcomCodeFactory()

        assert code.status == PaymentStatus.CREATED
        assert code.transaction.codes.get() == code

    def test_mark_failed_does_not_save(self, db):
        """mark_failed should only change the in-memory status."""
        code = EcomCodeFactory()

        code.mark_failed()

        assert code.status == PaymentStatus.FAILED
        assert EcomCode.objects.get(pk=code.pk).status == PaymentStatus.CREATED

    def test_codes_deleted_with_transaction(self, db):
        """Codes should cascade with their transaction."""
        code = EcomCodeFactory()

        code.transaction.delete()

        assert not EcomCode.objects.filter(pk=code.pk).exists()

    def test_str_representation(self, db):
        code = EcomCodeFactory(activate_code="ACT-1")

        assert str(code) == "EcomCode(ACT-1, created)"


class TestIntegrationErrorLog:
    """Tests for IntegrationErrorLog model."""

    def test_create_error_log(self, db):
        log = IntegrationErrorLogFactory(context={"charge_id": "chrg_1"})

        assert log.context == {"charge_id": "chrg_1"}
        assert str(log) == "IntegrationErrorLog(exception, API_ACTIVATE_CODE)"
        assert IntegrationErrorLog.objects.count() == 1
