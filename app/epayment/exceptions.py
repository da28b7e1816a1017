"""
E-payment exceptions.

Exception Hierarchy:
    RecoverableError - Transport failure calling an integration (inherits
        ExternalServiceError). Safe to skip and retry on a later run.
    IntegrationError - Integration answered but the answer is unusable
        (inherits ExternalServiceError). Not recoverable.

    LockAcquisitionError - Distributed lock held elsewhere (inherits ConflictError)

Usage:
    from epayment.exceptions import RecoverableError

    try:
        result = http_service.execute(url, headers, body, "POST", api_name)
    except RecoverableError as e:
        ErrorLogger.push_exception(ErrorType.EXCEPTION, ErrorMessage.API_ACTIVATE_CODE, e)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.exceptions import ConflictError, ExternalServiceError

if TYPE_CHECKING:
    from typing import Any


class RecoverableError(ExternalServiceError):
    """
    Transport-level failure calling an external integration.

    Raised for timeouts, connection errors and other failures where the
    remote system never gave an answer. Callers may skip the item and let
    a later run try again.

    Attributes:
        api_name: Message code of the integration being called
    """

    default_error_code: str = "RECOVERABLE_ERROR"
    is_retryable: bool = True

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        api_name: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if api_name:
            details["api_name"] = api_name
        super().__init__(message, error_code=error_code, details=details)
        self.api_name = api_name


class IntegrationError(ExternalServiceError):
    """
    An integration returned an unusable answer.

    Example:
        raise IntegrationError(
            "Marol returned HTTP 500",
            error_code="HTTP_500",
            details={"url": url},
        )
    """

    default_error_code: str = "INTEGRATION_ERROR"
    is_retryable: bool = False


class LockAcquisitionError(ConflictError):
    """
    Raised when a distributed lock cannot be acquired.

    The expiry worker treats this as "another run is in progress".
    """

    default_error_code: str = "LOCK_ACQUISITION_FAILED"


__all__ = [
    "IntegrationError",
    "LockAcquisitionError",
    "RecoverableError",
]
