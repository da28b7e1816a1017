"""
Error tracking for tolerated integration failures.

ErrorLogger records failures that the workflow deliberately does not
propagate (for example a course-service timeout while cancelling one code).
Each record is written to the ``epayment.error_tracking`` logger and stored
as an IntegrationErrorLog row for later inspection and alerting.

Usage:
    from epayment.constants import ErrorMessage, ErrorType
    from epayment.error_tracking import ErrorLogger

    try:
        http_service.execute(...)
    except RecoverableError as e:
        ErrorLogger.push_exception(
            ErrorType.EXCEPTION,
            ErrorMessage.API_ACTIVATE_CODE,
            e,
            context={"activate_code": code.activate_code},
        )
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.db import DatabaseError

if TYPE_CHECKING:
    from typing import Any

    from epayment.models import IntegrationErrorLog

logger = logging.getLogger(__name__)


class ErrorLogger:
    """Sink for tracked integration errors."""

    @classmethod
    def push_exception(
        cls,
        error_type: str,
        message_code: str,
        exception: BaseException,
        context: dict[str, Any] | None = None,
    ) -> IntegrationErrorLog | None:
        """
        Record a tolerated exception.

        Args:
            error_type: Category tag (ErrorType)
            message_code: Integration identifier (ErrorMessage)
            exception: The captured exception
            context: Extra identifiers for follow-up

        Returns:
            The stored IntegrationErrorLog, or None if it could not be stored
        """
        from epayment.models import IntegrationErrorLog

        context = context or {}
        details = getattr(exception, "details", None) or {}

        logger.error(
            f"{message_code}: {exception}",
            extra={
                "error_type": str(error_type),
                "message_code": str(message_code),
                "exception_class": type(exception).__name__,
                **context,
            },
        )

        try:
            return IntegrationErrorLog.objects.create(
                error_type=error_type,
                message_code=message_code,
                exception_class=type(exception).__name__,
                message=str(exception),
                context={**details, **context},
            )
        except DatabaseError:
            # Tracking must never break the caller
            logger.exception(
                "Failed to store integration error",
                extra={"message_code": str(message_code)},
            )
            return None


__all__ = ["ErrorLogger"]
