"""
Core Application - Infrastructure & Base Classes

This app contains infrastructure code shared by the domain apps:

- Generic, reusable base classes (no domain-specific logic)
- The application error taxonomy and its HTTP status mapping
- The API response envelope

Models (import from core.models):
    - BaseModel: Abstract model with timestamps (created_at, updated_at)

Services (import from core.services):
    - BaseService: Base class for service layer
    - ServiceResult: Standard result wrapper for success/failure handling

Exceptions (import from core.exceptions):
    - BaseApplicationError: Base exception with error codes
    - NotFoundError: Resource not found
    - PreconditionFailedError: Business rule or dependency failure
    - InternalServiceError: Unexpected failure
    - status_for_error_code: Error code to HTTP status

Responses (import from core.responses):
    - api_response: Build the standard response envelope
    - exception_handler: DRF exception handler using the envelope

Usage:
    from core.models import BaseModel
    from core.services import BaseService, ServiceResult
    from core.exceptions import NotFoundError
    from core.responses import api_response

Note:
    - Business logic should NOT go here. Extend core classes in your domain apps.
    - Django models and DRF-dependent modules are NOT imported here to avoid
      AppRegistryNotReady errors. Import them directly from their modules.
"""

# Services
from .services import BaseService, ServiceResult

# Exceptions (no Django dependencies)
from .exceptions import (
    BaseApplicationError,
    InternalServiceError,
    NotFoundError,
    PreconditionFailedError,
    status_for_error_code,
)

__all__ = [
    # Services
    "BaseService",
    "ServiceResult",
    # Exceptions
    "BaseApplicationError",
    "NotFoundError",
    "PreconditionFailedError",
    "InternalServiceError",
    "status_for_error_code",
]
