"""
Registration views.

This module provides API views for the continue-registration page:
- Page bootstrap data (pre-fill)
- Billing status
- Registration completion (profile update + Stripe subscription)
- SetupIntent creation for collecting a card

Every response uses the envelope from core.responses. Service error codes
map to HTTP status through core.exceptions.status_for_error_code:
NOT_FOUND -> 404, PRECONDITION_FAILED -> 400, INTERNAL_ERROR -> 500.

Related files:
    - serializers.py: Request validation and response docs
    - services.py: Business logic
    - urls.py: URL routing
"""

from dataclasses import asdict

from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from core.responses import api_response, service_result_response
from payments.adapters import get_stripe_adapter
from registration.serializers import (
    BillingStatusSerializer,
    ContinueRegistrationSerializer,
    PageBootstrapResponseSerializer,
    SetupIntentSerializer,
)
from registration.services import RegistrationQueryService, RegistrationService


class ContinueRegistrationPageDataView(APIView):
    """
    GET: Data to pre-fill the continue-registration page.

    URL: /api/v1/users/continue-registration-page-data/

    Returns:
        {"bootstrap_data": {"email", "company_name", "first_name",
        "last_name", "phone"}}
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Get continue-registration page data",
        tags=["Registration"],
        responses={200: PageBootstrapResponseSerializer},
    )
    def get(self, request):
        result = RegistrationQueryService.get_page_bootstrap_data(request.user.pk)
        return service_result_response(
            request,
            result,
            success_message="User and company continue registration page data retrieved successfully",
            data={"bootstrap_data": asdict(result.data)} if result.success else None,
        )


class BillingStatusView(APIView):
    """
    GET: Whether the user's company has billing set up.

    URL: /api/v1/users/billing-status/
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Get billing setup status",
        tags=["Registration"],
        responses={200: BillingStatusSerializer},
    )
    def get(self, request):
        has_billing_setup = RegistrationQueryService.has_billing_setup(request.user.pk)
        return api_response(
            request,
            message="Stripe status retrieved successfully.",
            data={"has_billing_setup": has_billing_setup},
        )


class ContinueRegistrationView(APIView):
    """
    PUT: Complete registration.

    URL: /api/v1/users/continue-registration/

    Request body:
        {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "phone": "555-123-4567",
            "avatar_type": "SMALL_BUSINESS",
            "payment_method_id": "pm_...",
            "price_id": "price_..."        // Optional
        }

    Updates the user's profile, creates a Stripe customer and
    subscription, and stores the Stripe IDs on the user's company.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Complete registration",
        description=(
            "Update profile fields and subscribe the user's company to a plan "
            "using the supplied Stripe payment method."
        ),
        tags=["Registration"],
        request=ContinueRegistrationSerializer,
        responses={200: None},
    )
    def put(self, request):
        serializer = ContinueRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = RegistrationService(gateway=get_stripe_adapter())
        result = service.complete_registration(request.user.pk, serializer.to_input())

        return service_result_response(
            request,
            result,
            success_message="User and company details updated successfully.",
        )


class SetupIntentView(APIView):
    """
    POST: Create a Stripe SetupIntent for collecting a card.

    URL: /api/v1/users/setup-intent/

    Returns:
        {"client_secret": "seti_..._secret_..."}
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Create setup intent",
        tags=["Registration"],
        request=None,
        responses={200: SetupIntentSerializer},
    )
    def post(self, request):
        result = RegistrationService(gateway=get_stripe_adapter()).create_setup_intent()
        return service_result_response(
            request,
            result,
            success_message="Setup intent created successfully.",
            data={"client_secret": result.data.client_secret} if result.success else None,
        )
