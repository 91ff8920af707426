"""
Payments app for Stripe integration.

This app handles:
- Stripe customer creation
- Payment method attachment and default assignment
- Subscription creation
- SetupIntents for collecting card details

It has no models; Stripe identifiers are stored on companies.Company.

Related apps:
    - companies: Company holds the Stripe customer and subscription IDs
    - registration: Drives billing provisioning during registration

Usage:
    from payments.adapters import get_stripe_adapter

    adapter = get_stripe_adapter()
    intent = adapter.create_setup_intent()
"""
