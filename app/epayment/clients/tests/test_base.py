"""
Tests for send_request, the transport layer shared by every client.
"""

from unittest.mock import MagicMock

import pytest
import requests

from epayment.clients.base import send_request
from epayment.exceptions import RecoverableError

URL = "https://courses.test/api/cancel-course"


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


class TestSendRequest:
    def test_any_http_answer_is_returned(self, session):
        response = MagicMock(status_code=503)
        session.request.return_value = response

        result = send_request(
            session, "POST", URL, api_name="API_CANCEL_COURSE", timeout=5, json={"a": 1}
        )

        assert result is response
        session.request.assert_called_once_with("POST", URL, timeout=5, json={"a": 1})

    @pytest.mark.parametrize(
        ("raised", "error_code"),
        [
            (requests.exceptions.ReadTimeout("slow"), "TIMEOUT"),
            (requests.exceptions.ConnectTimeout("slow connect"), "TIMEOUT"),
            (requests.exceptions.ConnectionError("refused"), "CONNECTION_ERROR"),
            (requests.exceptions.InvalidURL("bad"), "REQUEST_ERROR"),
        ],
    )
    def test_transport_failures_become_recoverable(self, session, raised, error_code):
        session.request.side_effect = raised

        with pytest.raises(RecoverableError) as exc_info:
            send_request(session, "GET", URL, api_name="API_MAGENTO", timeout=5)

        assert exc_info.value.error_code == error_code
        assert exc_info.value.api_name == "API_MAGENTO"
        assert exc_info.value.details == {"url": URL, "api_name": "API_MAGENTO"}
        assert exc_info.value.__cause__ is raised
