"""
Protocol definitions for the reconciler's collaborators.

The expired-transaction reconciler depends on these contracts rather than
on concrete stores and clients, so tests and alternative deployments can
plug in their own implementations.

Available Protocols:
    TransactionStore: Query and save EcomTransactions
    CodeStore: Query and save activation codes
    HttpExecutor: Outbound HTTP calls
    ContactSyncClient: Bifrost / Marol status updates
    MarketplaceClient: Magento order and user lookups
    ContactImporter: Marol contact creation

Default implementations:
    epayment.services.EcomTransactionService, EcomCodeService
    epayment.clients.HttpService, SyncContactService, MagentoService, MarolService
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime
    from typing import Any

    from epayment.models import EcomCode, EcomTransaction
    from epayment.types import (
        CourseItem,
        FailureEvent,
        HttpResult,
        OrderSnapshot,
        UserSnapshot,
    )


@runtime_checkable
class TransactionStore(Protocol):
    def find_transactions_by_status_in(
        self,
        start_time: datetime,
        end_time: datetime,
        statuses: Iterable[str],
    ) -> list[EcomTransaction]: ...

    def find_by_id(self, transaction_id: Any) -> EcomTransaction | None: ...

    def save(self, transaction: EcomTransaction) -> None: ...


@runtime_checkable
class CodeStore(Protocol):
    def find_by_transaction_id(self, transaction_id: Any) -> list[EcomCode] | None:
        """Return the transaction's codes, or None if the store has no record of it."""
        ...

    def save(self, code: EcomCode) -> None: ...


@runtime_checkable
class HttpExecutor(Protocol):
    def execute(
        self,
        url: str,
        headers: dict[str, str],
        body: dict[str, Any] | None,
        method: str,
        api_name: str,
    ) -> HttpResult:
        """
        Perform a request and return its status code and body.

        Raises:
            RecoverableError: If no answer was received
        """
        ...


@runtime_checkable
class ContactSyncClient(Protocol):
    def update_transaction_bifrost(self, event: FailureEvent) -> None: ...

    def update_c3_status_in_marol(self, contact_id: str, event: FailureEvent) -> None: ...


@runtime_checkable
class MarketplaceClient(Protocol):
    def find_order_by_id(self, order_id: str) -> OrderSnapshot | None: ...

    def find_user_by_id(self, user_id: str) -> UserSnapshot | None: ...


@runtime_checkable
class ContactImporter(Protocol):
    def import_contact_c3(
        self,
        user: UserSnapshot,
        course_item: CourseItem,
        method: str,
    ) -> str: ...
