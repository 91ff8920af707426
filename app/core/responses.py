"""
Standard API response envelope.

Every API response, success or failure, has the same shape:

    {
        "timestamp": "2024-05-01T12:00:00+00:00",
        "status": 200,
        "success": true,
        "message": "Stripe status retrieved successfully.",
        "data": {"has_billing_setup": false},
        "path": "/api/v1/users/billing-status/"
    }

``data`` is always an object; ``{}`` when there is no payload.

Usage:
    from core.responses import api_response, service_result_response

    # Plain success
    return api_response(request, message="Done", data={"id": 1})

    # From a ServiceResult, mapping error codes to HTTP status
    return service_result_response(
        request,
        result,
        success_message="User and company details updated successfully.",
    )

The DRF ``exception_handler`` below is registered in
``REST_FRAMEWORK["EXCEPTION_HANDLER"]`` so framework errors (validation,
authentication, permission, method not allowed) use the same envelope.
Anything else raised inside a view becomes a 500 envelope with a generic
message.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.views import set_rollback

from core.exceptions import status_for_error_code

if TYPE_CHECKING:
    from rest_framework.request import Request

    from core.services import ServiceResult

logger = logging.getLogger(__name__)

UNHANDLED_ERROR_MESSAGE = "An unexpected error occurred"


def build_envelope(
    *,
    status_code: int,
    message: str,
    data: dict[str, Any] | None = None,
    path: str = "",
) -> dict[str, Any]:
    """Build the response envelope dict."""
    return {
        "timestamp": timezone.now().isoformat(),
        "status": status_code,
        "success": status.is_success(status_code),
        "message": message,
        "data": data if data is not None else {},
        "path": path,
    }


def api_response(
    request: Request,
    *,
    message: str,
    data: dict[str, Any] | None = None,
    status_code: int = status.HTTP_200_OK,
) -> Response:
    """
    Return a DRF Response wrapped in the standard envelope.

    Args:
        request: Incoming request (its path is echoed back)
        message: Human-readable outcome
        data: Payload object, ``{}`` when omitted
        status_code: HTTP status
    """
    envelope = build_envelope(
        status_code=status_code,
        message=message,
        data=data,
        path=request.path,
    )
    return Response(envelope, status=status_code)


def service_result_response(
    request: Request,
    result: ServiceResult,
    *,
    success_message: str,
    data: dict[str, Any] | None = None,
) -> Response:
    """
    Turn a ServiceResult into an enveloped Response.

    On success the envelope carries ``success_message`` and ``data``.
    On failure the status comes from the result's error code and the
    message is the service error; field errors, if any, go under
    ``data.errors``.
    """
    if result.success:
        return api_response(request, message=success_message, data=data)

    error_data = {"errors": result.errors} if result.errors else None
    return api_response(
        request,
        message=result.error or "Request failed",
        data=error_data,
        status_code=status_for_error_code(result.error_code),
    )


def exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    """
    DRF exception handler that frames every API error in the envelope.

    Exceptions DRF does not handle itself become a 500 with a generic
    message; the traceback is logged, never returned.
    """
    request = context.get("request")
    path = request.path if request is not None else ""

    response = drf_exception_handler(exc, context)
    if response is None:
        logger.error(f"Unhandled API error on {path}", exc_info=exc)
        set_rollback()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        envelope = build_envelope(
            status_code=status_code,
            message=UNHANDLED_ERROR_MESSAGE,
            path=path,
        )
        return Response(envelope, status=status_code)

    if isinstance(exc, ValidationError):
        message = "Validation failed"
        data = {"errors": response.data}
    else:
        detail = response.data.get("detail") if isinstance(response.data, dict) else None
        message = str(detail) if detail else "Request failed"
        data = None

    if response.status_code >= 500:
        logger.error(f"API error on {path}: {message}")

    response.data = build_envelope(
        status_code=response.status_code,
        message=message,
        data=data,
        path=path,
    )
    return response
