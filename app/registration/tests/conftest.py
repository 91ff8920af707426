"""
Test configuration and fixtures for registration tests.

This module provides:
- Users with and without a company
- API client helpers for authenticated requests
- A mocked billing gateway (no Stripe network calls)

Usage:
    def test_example(authenticated_client, patched_gateway):
        response = authenticated_client.put(CONTINUE_REGISTRATION_URL, payload)
        patched_gateway.create_customer.assert_called_once()
"""

from unittest.mock import MagicMock

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from authentication.tests.factories import UserFactory
from companies.models import AvatarType
from companies.tests.factories import CompanyFactory
from payments.adapters import (
    CustomerResult,
    SetupIntentResult,
    StripeAdapter,
    SubscriptionResult,
)
from registration.types import RegistrationCompletionInput


# =============================================================================
# User Fixtures
# =============================================================================


@pytest.fixture
def company(db):
    """Company without billing, named so bootstrap data is predictable."""
    return CompanyFactory(name="Acme Inc")


@pytest.fixture
def user(company):
    """User belonging to ``company`` who has not completed registration."""
    return UserFactory(email="ada@example.com", company=company)


@pytest.fixture
def user_without_company(db):
    """User with no company association."""
    return UserFactory(email="solo@example.com", company=None)


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
def api_client():
    """Unauthenticated API client for public endpoints."""
    return APIClient()


@pytest.fixture
def authenticated_client_factory(db):
    """
    Factory to create authenticated clients for any user.

    Usage:
        def test_example(authenticated_client_factory, user_without_company):
            client = authenticated_client_factory(user_without_company)
    """

    def _make_client(user):
        client = APIClient()
        refresh = RefreshToken.for_user(user)
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {refresh.access_token}")
        return client

    return _make_client


@pytest.fixture
def authenticated_client(authenticated_client_factory, user):
    """API client authenticated with JWT token for the default user fixture."""
    return authenticated_client_factory(user)


# =============================================================================
# Billing Gateway Fixtures
# =============================================================================


@pytest.fixture
def gateway():
    """
    Billing gateway double with successful Stripe responses.

    Override a method's ``return_value`` or ``side_effect`` to simulate
    failures.
    """
    gateway = MagicMock(spec=StripeAdapter)
    gateway.create_customer.return_value = CustomerResult(
        id="cus_1", email="ada@example.com"
    )
    gateway.attach_payment_method.return_value = None
    gateway.set_default_payment_method.return_value = None
    gateway.create_subscription.return_value = SubscriptionResult(
        id="sub_1", status="active", latest_invoice_id="in_1"
    )
    gateway.create_setup_intent.return_value = SetupIntentResult(
        id="seti_1",
        client_secret="seti_1_secret_abc",
        status="requires_payment_method",
    )
    return gateway


@pytest.fixture
def patched_gateway(mocker, gateway):
    """Make the views use the ``gateway`` double instead of a real adapter."""
    mocker.patch("registration.views.get_stripe_adapter", return_value=gateway)
    return gateway


# =============================================================================
# Input Fixtures
# =============================================================================


@pytest.fixture
def registration_input():
    """Valid service input for completing registration."""
    return RegistrationCompletionInput(
        first_name="Ada",
        last_name="Lovelace",
        phone="555-123-4567",
        avatar_type=AvatarType.SMALL_BUSINESS,
        payment_method_id="pm_1",
        price_id="price_basic",
    )


@pytest.fixture
def registration_payload():
    """Valid request body for the continue-registration endpoint."""
    return {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "phone": "555-123-4567",
        "avatar_type": "SMALL_BUSINESS",
        "payment_method_id": "pm_1",
        "price_id": "price_basic",
    }
