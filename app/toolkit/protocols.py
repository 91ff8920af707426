"""
Protocol definitions (interfaces) for domain-specific services.

Protocols define contracts that services must fulfill, enabling:
- Duck typing with static type checking
- Dependency inversion (depend on abstractions, not concretions)
- Easy mocking in tests

Available Protocols:
    BillingGateway: Payment provider operations used during registration

Usage:
    from toolkit.protocols import BillingGateway

    class RegistrationService:
        def __init__(self, gateway: BillingGateway):
            self.gateway = gateway

    # payments.adapters.StripeAdapter is a valid BillingGateway
    # even without explicit inheritance (duck typing)
    service = RegistrationService(gateway=get_stripe_adapter())
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from payments.adapters import (
        CreateCustomerParams,
        CreateSubscriptionParams,
        CustomerResult,
        SetupIntentResult,
        SubscriptionResult,
    )


@runtime_checkable
class BillingGateway(Protocol):
    """
    Protocol for the payment provider used to provision billing.

    Implementations raise ``payments.exceptions.StripeError`` (or a
    subclass) when the provider rejects a call.

    Example:
        def setup_billing(gateway: BillingGateway, params, pm_id):
            customer = gateway.create_customer(params)
            gateway.attach_payment_method(pm_id, customer.id)
    """

    def create_customer(self, params: CreateCustomerParams) -> CustomerResult:
        """Create a customer; the result's id may be None if the provider omitted it."""
        ...

    def attach_payment_method(self, payment_method_id: str, customer_id: str) -> None:
        """Attach a payment method to a customer."""
        ...

    def set_default_payment_method(self, customer_id: str, payment_method_id: str) -> None:
        """Make a payment method the customer's default for invoices."""
        ...

    def create_subscription(self, params: CreateSubscriptionParams) -> SubscriptionResult:
        """Create a subscription; the result's id may be None if the provider omitted it."""
        ...

    def create_setup_intent(self) -> SetupIntentResult:
        """Create a card setup intent for collecting a payment method."""
        ...
