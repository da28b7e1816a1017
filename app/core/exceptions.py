"""
Base exception classes for application-wide error handling.

Exception Hierarchy:
    BaseApplicationError (base)
    ├── ConflictError - State conflicts (locks, invalid transitions)
    └── ExternalServiceError - Third-party service failures

Usage:
    from core.exceptions import ExternalServiceError

    raise ExternalServiceError(
        "Magento unavailable",
        error_code="TIMEOUT",
        details={"service": "magento"},
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class BaseApplicationError(Exception):
    """
    Base exception for all application-specific errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable code, recorded with integration errors
        details: Additional error context
    """

    default_error_code: str = "APPLICATION_ERROR"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )


class ConflictError(BaseApplicationError):
    """
    Raised when an operation conflicts with current resource state.

    Use for:
    - Invalid state transitions
    - A lock already held by another worker
    """

    default_error_code: str = "CONFLICT"


class ExternalServiceError(BaseApplicationError):
    """
    Raised when an external service call fails.

    Use for:
    - Network timeouts and connection failures
    - Unexpected responses from Magento, Bifrost, Marol, or the course service

    Note:
        Log the original error for debugging. The integration error log keeps
        error_code and details for later investigation.
    """

    default_error_code: str = "EXTERNAL_SERVICE_ERROR"
