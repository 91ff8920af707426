"""
Value types for the registration flow.

These are plain immutable dataclasses; none of them is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RegistrationCompletionInput:
    """
    Profile and billing details submitted to complete registration.

    Attributes:
        first_name: User's given name
        last_name: User's family name
        phone: User's phone number
        avatar_type: Company type (companies.models.AvatarType value)
        payment_method_id: Stripe PaymentMethod token (pm_...)
        price_id: Stripe Price of the plan to subscribe to
    """

    first_name: str
    last_name: str
    phone: str
    avatar_type: str
    payment_method_id: str
    price_id: str


@dataclass(frozen=True)
class PageBootstrapData:
    """
    Data used to pre-fill the continue-registration page.

    ``company_name`` is None when the user has no company.
    """

    email: str
    company_name: str | None
    first_name: str
    last_name: str
    phone: str


@dataclass(frozen=True)
class BillingProvisioning:
    """Stripe identifiers created for a company, not yet saved."""

    customer_id: str
    subscription_id: str
