"""
Base service layer patterns for business logic encapsulation.

This module provides foundational patterns for the service layer:
- ServiceResult: Standard result wrapper for consistent success/failure handling
- BaseService: Base class with common service utilities

Pattern Comparison:
    - ServiceResult: Use for expected failures (missing records, invalid state)
    - Exceptions: Use for unexpected failures (database errors, bugs)

Usage:
    from core.services import BaseService, ServiceResult

    class EcomTransactionService(BaseService):
        @classmethod
        def find_by_id(cls, transaction_id):
            ...

    result = reconciler.expire_transaction(transaction_id)
    if result.success:
        summary = result.data.to_dict()
    else:
        logger.warning(f"{result.error} ({result.error_code})")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

# Generic type for ServiceResult data
T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    Standard result wrapper for service operations.

    Attributes:
        success: Whether the operation succeeded
        data: Result data. Failed runs may still carry partial data.
        error: Error message if failed
        error_code: Machine-readable error code
    """

    success: bool
    data: T | None = None
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def success(cls, data: T) -> ServiceResult[T]:
        return cls(success=True, data=data)

    @classmethod
    def failure(
        cls,
        error: str,
        error_code: str | None = None,
        data: T | None = None,
    ) -> ServiceResult[T]:
        """
        Create a failed result.

        Args:
            error: Human-readable error message
            error_code: Machine-readable error code
            data: Optional partial result gathered before the failure

        Returns:
            ServiceResult with success=False and error details
        """
        return cls(success=False, data=data, error=error, error_code=error_code)

    @classmethod
    def from_exception(
        cls,
        exc: Exception,
        error_code: str | None = None,
        data: T | None = None,
    ) -> ServiceResult[T]:
        """
        Create a failed result from an exception.

        The error code defaults to the exception's own error_code when it has
        one, else to the upper-cased class name.
        """
        return cls(
            success=False,
            data=data,
            error=str(exc),
            error_code=error_code
            or getattr(exc, "error_code", None)
            or exc.__class__.__name__.upper(),
        )

    def __bool__(self) -> bool:
        return self.success


class BaseService:
    """
    Base class for service layer classes.

    Design Notes:
        - Use @classmethod (no instance state) for store-style services
        - Use ServiceResult for expected failures
        - Raise exceptions for unexpected failures
    """

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """
        Get logger for this service.

        Returns a logger named after the service class for
        easy filtering in logs.
        """
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

