"""
Company models.

A Company is the organization a user belongs to. It carries the company
type chosen during registration and the Stripe identifiers created when
billing is provisioned.

Related files:
    - authentication/models.py: User.company foreign key
    - registration/services.py: Billing provisioning during registration
"""

from __future__ import annotations

from django.db import models

from core.models import BaseModel


class AvatarType(models.TextChoices):
    """Company type selected on the continue-registration form."""

    INDIVIDUAL = "INDIVIDUAL", "Individual"
    SMALL_BUSINESS = "SMALL_BUSINESS", "Small business"
    AGENCY = "AGENCY", "Agency"
    ENTERPRISE = "ENTERPRISE", "Enterprise"
    NON_PROFIT = "NON_PROFIT", "Non-profit"


class Company(BaseModel):
    """
    An organization that users are associated with.

    Fields:
        name: Display name of the company
        avatar_type: Company type classifier
        stripe_customer_id: Stripe customer (cus_...) once billing is set up
        stripe_subscription_id: Stripe subscription (sub_...) once billing is set up

    The two Stripe identifiers are written together through
    ``record_billing``; a company either has both or neither.

    Usage:
        company = Company.objects.create(name="Acme")
        company.record_billing("cus_123", "sub_456")
        company.save()
        company.has_billing_setup  # True
    """

    name = models.CharField(
        max_length=255,
        help_text="Company display name",
    )
    avatar_type = models.CharField(
        max_length=32,
        choices=AvatarType.choices,
        blank=True,
        default="",
        help_text="Company type classifier",
    )
    stripe_customer_id = models.CharField(
        max_length=255,
        blank=True,
        null=True,
        help_text="Stripe customer ID (cus_...)",
    )
    stripe_subscription_id = models.CharField(
        max_length=255,
        blank=True,
        null=True,
        help_text="Stripe subscription ID (sub_...)",
    )

    class Meta(BaseModel.Meta):
        verbose_name = "company"
        verbose_name_plural = "companies"

    def __str__(self) -> str:
        return self.name

    @property
    def has_billing_setup(self) -> bool:
        """True when both Stripe identifiers are non-empty."""
        return bool(self.stripe_customer_id) and bool(self.stripe_subscription_id)

    def record_billing(self, customer_id: str, subscription_id: str) -> None:
        """
        Set both Stripe identifiers. Does not save.

        Raises:
            ValueError: If either identifier is empty
        """
        if not customer_id or not subscription_id:
            raise ValueError("Both customer_id and subscription_id are required")
        self.stripe_customer_id = customer_id
        self.stripe_subscription_id = subscription_id
