"""
Tests for the ORM-backed stores.

updated_at is auto_now, so stale timestamps are forced with QuerySet.update().
"""

from datetime import datetime, timedelta
from datetime import timezone as dt_timezone
from uuid import uuid4

import pytest

from epayment.services import EcomCodeService, EcomTransactionService
from epayment.state_machines import EXPIRABLE_STATUSES, PaymentStatus
from epayment.tests.helpers import set_updated_at
from epayment.tests.factories import EcomCodeFactory, EcomTransactionFactory

WINDOW_START = datetime(2024, 4, 30, 11, 15, tzinfo=dt_timezone.utc)
WINDOW_END = datetime(2024, 5, 1, 11, 15, tzinfo=dt_timezone.utc)


def _transaction_at(when, **kwargs):
    return set_updated_at(EcomTransactionFactory(**kwargs), when)


class TestFindTransactionsByStatusIn:
    def test_start_is_inclusive(self, db):
        transaction = _transaction_at(WINDOW_START)

        found = EcomTransactionService.find_transactions_by_status_in(
            WINDOW_START, WINDOW_END, EXPIRABLE_STATUSES
        )

        assert found == [transaction]

    def test_end_is_exclusive(self, db):
        _transaction_at(WINDOW_END)

        found = EcomTransactionService.find_transactions_by_status_in(
            WINDOW_START, WINDOW_END, EXPIRABLE_STATUSES
        )

        assert found == []

    def test_outside_window_excluded(self, db):
        _transaction_at(WINDOW_START - timedelta(seconds=1))
        _transaction_at(WINDOW_END + timedelta(minutes=5))

        found = EcomTransactionService.find_transactions_by_status_in(
            WINDOW_START, WINDOW_END, EXPIRABLE_STATUSES
        )

        assert found == []

    def test_filters_by_status(self, db):
        inside = WINDOW_END - timedelta(hours=1)
        created = _transaction_at(inside, status=PaymentStatus.CREATED)
        pending = _transaction_at(inside - timedelta(minutes=1), status=PaymentStatus.PENDING)
        for status in (PaymentStatus.SUCCESS, PaymentStatus.FAILED, PaymentStatus.TIMEOUT):
            _transaction_at(inside, status=status)

        found = EcomTransactionService.find_transactions_by_status_in(
            WINDOW_START, WINDOW_END, EXPIRABLE_STATUSES
        )

        # Oldest update first
        assert found == [pending, created]

    def test_single_status(self, db):
        inside = WINDOW_END - timedelta(hours=1)
        _transaction_at(inside, status=PaymentStatus.CREATED)
        pending = _transaction_at(inside, status=PaymentStatus.PENDING)

        found = EcomTransactionService.find_transactions_by_status_in(
            WINDOW_START, WINDOW_END, [PaymentStatus.PENDING]
        )

        assert found == [pending]


class TestEcomTransactionServiceLookups:
    def test_find_by_id(self, db, created_transaction):
        assert EcomTransactionService.find_by_id(created_transaction.id) == created_transaction

    def test_find_by_id_unknown(self, db):
        assert EcomTransactionService.find_by_id(uuid4()) is None

    def test_save_persists_status(self, db, pending_transaction):
        pending_transaction.time_out()
        EcomTransactionService.save(pending_transaction)

        pending_transaction.refresh_from_db()
        assert pending_transaction.status == PaymentStatus.TIMEOUT


class TestEcomCodeService:
    def test_returns_codes_for_transaction(self, db, created_transaction):
        first = EcomCodeFactory(transaction=created_transaction)
        second = EcomCodeFactory(transaction=created_transaction)
        EcomCodeFactory()  # other transaction

        codes = EcomCodeService.find_by_transaction_id(created_transaction.id)

        assert set(codes) == {first, second}

    def test_known_transaction_without_codes_is_empty(self, db, created_transaction):
        assert EcomCodeService.find_by_transaction_id(created_transaction.id) == []

    def test_unknown_transaction_is_none(self, db):
        assert EcomCodeService.find_by_transaction_id(uuid4()) is None

    def test_save_persists_status(self, db):
        code = EcomCodeFactory()
        code.mark_failed()

        EcomCodeService.save(code)

        code.refresh_from_db()
        assert code.status == PaymentStatus.FAILED


@pytest.mark.parametrize("store", [EcomTransactionService, EcomCodeService])
def test_stores_satisfy_protocols(store):
    from epayment.protocols import CodeStore, TransactionStore

    protocol = TransactionStore if store is EcomTransactionService else CodeStore
    assert isinstance(store(), protocol)
