"""
Payment adapters for external services.

All external payment API calls should go through these adapters to ensure
consistent error handling, timeouts, and observability.

Usage:
    from payments.adapters import CreateCustomerParams, get_stripe_adapter

    customer = get_stripe_adapter().create_customer(
        CreateCustomerParams(email="owner@example.com")
    )
"""

from payments.adapters.stripe_adapter import (
    CreateCustomerParams,
    CreateSubscriptionParams,
    CustomerResult,
    SetupIntentResult,
    StripeAdapter,
    StripeClientConfig,
    SubscriptionResult,
    get_stripe_adapter,
)

__all__ = [
    "CreateCustomerParams",
    "CreateSubscriptionParams",
    "CustomerResult",
    "SetupIntentResult",
    "StripeAdapter",
    "StripeClientConfig",
    "SubscriptionResult",
    "get_stripe_adapter",
]
