"""
Tests for SyncContactService (Bifrost and Marol status updates).
"""

import pytest
import responses
from responses import matchers

from epayment.clients import SyncContactService
from epayment.clients.sync_contact import BifrostClient, MarolStatusClient
from epayment.exceptions import IntegrationError, RecoverableError
from epayment.types import FailureEvent

BIFROST_URL = "https://bifrost.test/api"
MAROL_URL = "https://marol.test/api"


@pytest.fixture
def sync_contact():
    return SyncContactService(
        bifrost=BifrostClient(BIFROST_URL, headers={"X-Api-Key": "bifrost-key"}),
        marol=MarolStatusClient(MAROL_URL, headers={"X-Api-Key": "marol-key"}),
    )


class TestUpdateTransactionBifrost:
    @responses.activate
    def test_posts_failure_event(self, sync_contact):
        responses.add(
            responses.POST,
            f"{BIFROST_URL}/transactions/status",
            status=204,
            match=[
                matchers.json_params_matcher({"id": "chrg_1", "status": "failed"}),
                matchers.header_matcher({"X-Api-Key": "bifrost-key"}),
            ],
        )

        sync_contact.update_transaction_bifrost(FailureEvent(id="chrg_1", status="failed"))

        assert len(responses.calls) == 1

    @responses.activate
    def test_error_answer_raises(self, sync_contact):
        responses.add(responses.POST, f"{BIFROST_URL}/transactions/status", status=503)

        with pytest.raises(IntegrationError) as exc_info:
            sync_contact.update_transaction_bifrost(FailureEvent(id="chrg_1", status="failed"))

        assert exc_info.value.error_code == "HTTP_503"

    @responses.activate
    def test_unreachable_raises_recoverable_error(self, sync_contact):
        # No registered URL: responses raises ConnectionError
        with pytest.raises(RecoverableError) as exc_info:
            sync_contact.update_transaction_bifrost(FailureEvent(id="chrg_1", status="failed"))

        assert exc_info.value.error_code == "CONNECTION_ERROR"
        assert exc_info.value.api_name == "API_BIFROST"


class TestUpdateC3StatusInMarol:
    @responses.activate
    def test_posts_contact_status(self, sync_contact):
        responses.add(
            responses.POST,
            f"{MAROL_URL}/contacts/987/status",
            json={"id": 987, "status": "timeout"},
            match=[matchers.json_params_matcher({"id": "", "status": "timeout"})],
        )

        sync_contact.update_c3_status_in_marol("987", FailureEvent(id="", status="timeout"))

        assert len(responses.calls) == 1


def test_clients_built_from_settings(settings):
    settings.BIFROST_API_URL = "https://bifrost.example"
    settings.BIFROST_API_KEY = "b-key"
    settings.MAROL_API_URL = "https://marol.example"
    settings.MAROL_API_KEY = ""

    service = SyncContactService()

    assert service._bifrost._base_url == "https://bifrost.example"
    assert service._bifrost._session.headers["X-Api-Key"] == "b-key"
    assert "X-Api-Key" not in service._marol._session.headers
