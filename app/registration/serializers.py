"""
Serializers for the registration endpoints.

This module provides DRF serializers for:
- Continue-registration request (input validation)
- Page bootstrap data, billing status and setup intent (response docs)

Related files:
    - views.py: Views that use these serializers
    - types.py: RegistrationCompletionInput built from validated data
"""

from django.conf import settings
from rest_framework import serializers

from companies.models import AvatarType
from registration.types import RegistrationCompletionInput
from toolkit.validators import validate_phone_number


class ContinueRegistrationSerializer(serializers.Serializer):
    """
    Validates the continue-registration form.

    ``price_id`` may be omitted, in which case the configured default
    plan (STRIPE_PRICE_ID) is used.
    """

    first_name = serializers.CharField(max_length=255)
    last_name = serializers.CharField(max_length=255)
    phone = serializers.CharField(
        max_length=32,
        validators=[validate_phone_number],
        help_text="Phone number, e.g. 555-123-4567 or +1-555-123-4567",
    )
    avatar_type = serializers.ChoiceField(choices=AvatarType.choices)
    payment_method_id = serializers.CharField(
        max_length=255,
        help_text="Stripe PaymentMethod ID (pm_...) collected by the browser",
    )
    price_id = serializers.CharField(
        max_length=255,
        required=False,
        allow_blank=True,
        help_text="Stripe Price ID; defaults to the standard plan",
    )

    def to_input(self) -> RegistrationCompletionInput:
        """Build the service input from validated data."""
        data = self.validated_data
        return RegistrationCompletionInput(
            first_name=data["first_name"],
            last_name=data["last_name"],
            phone=data["phone"],
            avatar_type=data["avatar_type"],
            payment_method_id=data["payment_method_id"],
            price_id=data.get("price_id") or settings.STRIPE_PRICE_ID,
        )


class PageBootstrapDataSerializer(serializers.Serializer):
    """Pre-fill data for the continue-registration page."""

    email = serializers.EmailField()
    company_name = serializers.CharField(allow_null=True)
    first_name = serializers.CharField(allow_blank=True)
    last_name = serializers.CharField(allow_blank=True)
    phone = serializers.CharField(allow_blank=True)


class PageBootstrapResponseSerializer(serializers.Serializer):
    bootstrap_data = PageBootstrapDataSerializer()


class BillingStatusSerializer(serializers.Serializer):
    has_billing_setup = serializers.BooleanField()


class SetupIntentSerializer(serializers.Serializer):
    client_secret = serializers.CharField()
