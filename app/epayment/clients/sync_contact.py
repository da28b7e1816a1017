"""
Status synchronization with Bifrost and Marol.
"""

from __future__ import annotations

from urllib.parse import quote

from django.conf import settings

from epayment.clients.base import BaseApiClient
from epayment.constants import ErrorMessage
from epayment.types import FailureEvent


class BifrostClient(BaseApiClient):
    """Client for the Bifrost transaction status API."""

    api_name = ErrorMessage.API_BIFROST.value

    def post_transaction_status(self, event: FailureEvent) -> None:
        self._request("POST", "/transactions/status", json=event.to_dict())


class MarolStatusClient(BaseApiClient):
    """Client for the Marol contact status API."""

    api_name = ErrorMessage.API_MAROL.value

    def post_contact_status(self, contact_id: str, event: FailureEvent) -> None:
        self._request(
            "POST",
            f"/contacts/{quote(str(contact_id), safe='')}/status",
            json=event.to_dict(),
        )


class SyncContactService:
    """
    Pushes payment status changes downstream.

    - Bifrost keeps transactions in line with what the payment gateway saw
    - Marol keeps C3 contact statuses in line with the purchase outcome

    Args:
        bifrost: Bifrost client (built from settings if omitted)
        marol: Marol status client (built from settings if omitted)
    """

    def __init__(
        self,
        bifrost: BifrostClient | None = None,
        marol: MarolStatusClient | None = None,
    ) -> None:
        self._bifrost = bifrost or BifrostClient(
            settings.BIFROST_API_URL,
            headers=_api_key_header(settings.BIFROST_API_KEY),
        )
        self._marol = marol or MarolStatusClient(
            settings.MAROL_API_URL,
            headers=_api_key_header(settings.MAROL_API_KEY),
        )

    def update_transaction_bifrost(self, event: FailureEvent) -> None:
        """Report a transaction status (event.id is the charge id)."""
        self._bifrost.post_transaction_status(event)

    def update_c3_status_in_marol(self, contact_id: str, event: FailureEvent) -> None:
        """Set the status of a C3 contact."""
        self._marol.post_contact_status(contact_id, event)


def _api_key_header(api_key: str) -> dict[str, str] | None:
    return {"X-Api-Key": api_key} if api_key else None
