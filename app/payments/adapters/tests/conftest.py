"""
Pytest fixtures for Stripe adapter tests.

This module provides fixtures for testing the Stripe adapter, including
a mocked StripeClient, mock Stripe API responses, and error conditions.

Sections:
    - Mock Stripe Response Fixtures
    - Mock Stripe Error Fixtures
    - Adapter Fixtures
"""

from dataclasses import dataclass
from typing import Any
from unittest.mock import MagicMock

import pytest
import stripe

from payments.adapters import StripeAdapter, StripeClientConfig


# =============================================================================
# Mock Stripe Response Fixtures
# =============================================================================


@dataclass
class MockStripeObject:
    """Mock Stripe API object with to_dict support."""

    data: dict[str, Any]

    def __getattr__(self, name: str) -> Any:
        if name == "data":
            return self.__dict__["data"]
        return self.data.get(name)

    def to_dict(self) -> dict[str, Any]:
        return self.data


@pytest.fixture
def mock_customer():
    """Create a mock Customer response."""

    def _create(
        id: str | None = "cus_test123456",
        email: str = "owner@example.com",
    ) -> MockStripeObject:
        return MockStripeObject(
            {
                "id": id,
                "object": "customer",
                "email": email,
                "invoice_settings": {"default_payment_method": None},
            }
        )

    return _create


@pytest.fixture
def mock_subscription():
    """Create a mock Subscription response."""

    def _create(
        id: str | None = "sub_test123456",
        status: str = "active",
        latest_invoice: Any = "in_test123456",
    ) -> MockStripeObject:
        return MockStripeObject(
            {
                "id": id,
                "object": "subscription",
                "status": status,
                "latest_invoice": latest_invoice,
            }
        )

    return _create


@pytest.fixture
def mock_setup_intent():
    """Create a mock SetupIntent response."""
    return MockStripeObject(
        {
            "id": "seti_test123456",
            "object": "setup_intent",
            "client_secret": "seti_test123456_secret_abc",
            "status": "requires_payment_method",
        }
    )


# =============================================================================
# Mock Stripe Error Fixtures
# =============================================================================


@pytest.fixture
def card_error():
    """Create a Stripe CardError."""

    def _create(
        message: str = "Your card was declined.",
        code: str = "card_declined",
        decline_code: str | None = "generic_decline",
    ) -> stripe.CardError:
        error = stripe.CardError(
            message=message,
            param=None,
            code=code,
        )
        error.decline_code = decline_code
        return error

    return _create


@pytest.fixture
def insufficient_funds_error(card_error):
    """Create a Stripe CardError for insufficient funds."""
    return card_error(
        message="Your card has insufficient funds.",
        decline_code="insufficient_funds",
    )


@pytest.fixture
def invalid_request_error():
    """Create a Stripe InvalidRequestError."""

    def _create(
        message: str = "No such PaymentMethod: 'pm_missing'",
        param: str | None = "payment_method",
        code: str = "resource_missing",
    ) -> stripe.InvalidRequestError:
        return stripe.InvalidRequestError(
            message=message,
            param=param,
            code=code,
        )

    return _create


@pytest.fixture
def rate_limit_error():
    """Create a Stripe RateLimitError."""
    return stripe.RateLimitError(
        message="Too many requests hit the API too quickly.",
    )


@pytest.fixture
def api_connection_error():
    """Create a Stripe APIConnectionError."""
    return stripe.APIConnectionError(
        message="Could not connect to Stripe.",
    )


@pytest.fixture
def api_error():
    """Create a Stripe APIError."""
    return stripe.APIError(
        message="Something went wrong on Stripe's end.",
    )


@pytest.fixture
def authentication_error():
    """Create a Stripe AuthenticationError."""
    return stripe.AuthenticationError(
        message="Invalid API Key provided.",
    )


# =============================================================================
# Adapter Fixtures
# =============================================================================


@pytest.fixture
def stripe_config():
    """Config with a test secret key."""
    return StripeClientConfig(secret_key="sk_test_123", timeout_seconds=5)


@pytest.fixture
def mock_stripe_client(mock_customer, mock_subscription, mock_setup_intent):
    """
    Mock stripe.StripeClient with successful default responses.

    Override per test, e.g.:
        mock_stripe_client.payment_methods.attach.side_effect = card_error()
    """
    client = MagicMock(spec_set=["customers", "payment_methods", "subscriptions", "setup_intents"])
    client.customers.create.return_value = mock_customer()
    client.customers.update.return_value = mock_customer()
    client.payment_methods.attach.return_value = MockStripeObject(
        {"id": "pm_test123456", "object": "payment_method"}
    )
    client.subscriptions.create.return_value = mock_subscription()
    client.setup_intents.create.return_value = mock_setup_intent
    return client


@pytest.fixture
def adapter(stripe_config, mock_stripe_client):
    """StripeAdapter wired to the mocked client."""
    return StripeAdapter(stripe_config, client=mock_stripe_client)
