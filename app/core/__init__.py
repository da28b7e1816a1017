"""
Core infrastructure shared by the e-payment apps.

Services (import from core.services):
    - ServiceResult: Success/failure wrapper returned by services
    - BaseService: Base class providing a per-service logger

Exceptions (import from core.exceptions):
    - BaseApplicationError and its subclasses

Models (import from core.models / core.model_mixins):
    - BaseModel: Abstract model with created_at / updated_at
    - UUIDPrimaryKeyMixin: UUID primary key

Note:
    Models and model mixins are NOT imported here to avoid AppRegistryNotReady
    errors. Import them directly from their modules.
"""

from .exceptions import (
    BaseApplicationError,
    ConflictError,
    ExternalServiceError,
)
from .services import BaseService, ServiceResult

__all__ = [
    # Services
    "BaseService",
    "ServiceResult",
    # Exceptions
    "BaseApplicationError",
    "ConflictError",
    "ExternalServiceError",
]
