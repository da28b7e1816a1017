"""
Tests for ServiceResult and BaseService.
"""

from core.exceptions import ConflictError
from core.services import BaseService, ServiceResult


class TestServiceResult:
    def test_success(self):
        result = ServiceResult.success({"id": 1})

        assert result.success is True
        assert bool(result) is True
        assert result.data == {"id": 1}
        assert result.error is None

    def test_failure_keeps_partial_data(self):
        result = ServiceResult.failure("boom", error_code="UNEXPECTED_ERROR", data=[1])

        assert bool(result) is False
        assert result.data == [1]
        assert result.error == "boom"
        assert result.error_code == "UNEXPECTED_ERROR"

    def test_from_exception_uses_application_error_code(self):
        result = ServiceResult.from_exception(ConflictError("held", error_code="LOCKED"))

        assert result.success is False
        assert result.error_code == "LOCKED"
        assert result.error == "[LOCKED] held"
        assert result.data is None

    def test_from_exception_falls_back_to_class_name(self):
        result = ServiceResult.from_exception(KeyError("x"))

        assert result.error_code == "KEYERROR"

    def test_from_exception_explicit_code_and_data(self):
        result = ServiceResult.from_exception(ValueError("x"), error_code="BAD", data=3)

        assert result.error_code == "BAD"
        assert result.data == 3


class TestBaseService:
    def test_logger_named_after_service(self):
        class ReportService(BaseService):
            pass

        assert ReportService.get_logger().name == f"{__name__}.ReportService"
