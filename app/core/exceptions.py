"""
Base exception classes for application-wide error handling.

This module provides a small, standardized error taxonomy that enables:
- Consistent error responses across the application
- Machine-readable error codes for client handling
- A single mapping from error kind to HTTP status

Exception Hierarchy:
    BaseApplicationError (base)
    ├── NotFoundError - Resource not found (404)
    ├── PreconditionFailedError - Business rule or dependency failure (400)
    └── InternalServiceError - Unexpected, unclassified failure (500)

Services do not raise these for expected failures. They return
``ServiceResult.failure(...)`` carrying one of the ``default_error_code``
values below, and the view layer turns that code back into a status with
``status_for_error_code``.

Usage:
    from core.exceptions import NotFoundError, status_for_error_code

    return ServiceResult.failure(
        "User not found",
        error_code=NotFoundError.default_error_code,
    )

    # In a view
    status_code = status_for_error_code(result.error_code)  # 404
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
        error_code: Machine-readable code for client-side handling
        details: Additional error context (field errors, metadata, etc.)
    """

    default_error_code: str = "APPLICATION_ERROR"
    status_code: int = 400

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

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Example:
            {
                "error": "User not found",
                "error_code": "NOT_FOUND",
                "details": {"user_id": 123}
            }
        """
        result: dict[str, Any] = {
            "error": self.message,
            "error_code": self.error_code,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )


class NotFoundError(BaseApplicationError):
    """
    A requested entity does not exist.

    Use for single-resource lookups where existence is expected,
    e.g. the authenticated user's record has been removed.
    """

    default_error_code: str = "NOT_FOUND"
    status_code: int = 404


class PreconditionFailedError(BaseApplicationError):
    """
    A business rule was violated or a declared dependency failed.

    Use for:
    - Missing associations (user without a company)
    - Missing required input
    - External services returning errors or incomplete objects

    Note:
        Maps to HTTP 400. The request was well-formed but cannot be
        fulfilled in the current state.
    """

    default_error_code: str = "PRECONDITION_FAILED"
    status_code: int = 400


class InternalServiceError(BaseApplicationError):
    """
    An unexpected failure that does not fit any other kind.

    Only the message string reaches the client; tracebacks stay in logs.
    """

    default_error_code: str = "INTERNAL_ERROR"
    status_code: int = 500


ERROR_STATUS_CODES: dict[str, int] = {
    cls.default_error_code: cls.status_code
    for cls in (NotFoundError, PreconditionFailedError, InternalServiceError)
}


def status_for_error_code(error_code: str | None, default: int = 500) -> int:
    """
    Return the HTTP status for a service error code.

    Unknown codes fall back to ``default`` so that an unclassified failure
    is never reported as a client error.
    """
    if error_code is None:
        return default
    return ERROR_STATUS_CODES.get(error_code, default)
