"""
Tests for ErrorLogger.
"""

from django.db import DatabaseError

from epayment.constants import ErrorMessage, ErrorType
from epayment.error_tracking import ErrorLogger
from epayment.exceptions import RecoverableError
from epayment.models import IntegrationErrorLog


class TestPushException:
    """Tests for ErrorLogger.push_exception."""

    def test_stores_integration_error(self, db):
        """Should persist the error with its context."""
        error = RecoverableError(
            "Request to https://courses.test timed out after 10s",
            error_code="TIMEOUT",
            api_name=ErrorMessage.API_CANCEL_COURSE,
            details={"url": "https://courses.test"},
        )

        log = ErrorLogger.push_exception(
            ErrorType.EXCEPTION,
            ErrorMessage.API_ACTIVATE_CODE,
            error,
            context={"charge_id": "chrg_1", "activate_code": "ACT-1"},
        )

        assert log is not None
        stored = IntegrationErrorLog.objects.get(pk=log.pk)
        assert stored.error_type == ErrorType.EXCEPTION
        assert stored.message_code == ErrorMessage.API_ACTIVATE_CODE
        assert stored.exception_class == "RecoverableError"
        assert "timed out" in stored.message
        assert stored.context == {
            "url": "https://courses.test",
            "api_name": "API_CANCEL_COURSE",
            "charge_id": "chrg_1",
            "activate_code": "ACT-1",
        }

    def test_plain_exception_without_context(self, db):
        log = ErrorLogger.push_exception(
            ErrorType.EXCEPTION,
            ErrorMessage.API_MAROL,
            ValueError("bad payload"),
        )

        assert log.exception_class == "ValueError"
        assert log.message == "bad payload"
        assert log.context == {}

    def test_logs_at_error_level(self, db, mocker):
        mock_logger = mocker.patch("epayment.error_tracking.logger")

        ErrorLogger.push_exception(
            ErrorType.EXCEPTION,
            ErrorMessage.API_ACTIVATE_CODE,
            RecoverableError("connection refused", error_code="CONNECTION_ERROR"),
            context={"activate_code": "ACT-9"},
        )

        mock_logger.error.assert_called_once()
        extra = mock_logger.error.call_args.kwargs["extra"]
        assert extra["message_code"] == "API_ACTIVATE_CODE"
        assert extra["exception_class"] == "RecoverableError"
        assert extra["activate_code"] == "ACT-9"

    def test_database_failure_returns_none(self, db, mocker):
        """Tracking failures must not propagate to the caller."""
        mocker.patch.object(
            IntegrationErrorLog.objects,
            "create",
            side_effect=DatabaseError("disk full"),
        )

        result = ErrorLogger.push_exception(
            ErrorType.EXCEPTION,
            ErrorMessage.API_ACTIVATE_CODE,
            RecoverableError("timeout"),
        )

        assert result is None
