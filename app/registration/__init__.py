"""
Registration app.

Completes a user's registration after sign-up:
- Serves the data needed to pre-fill the continue-registration page
- Reports whether the user's company already has billing set up
- Updates the user's profile and provisions a Stripe subscription

Related apps:
    - authentication: User model
    - companies: Company model holding Stripe identifiers
    - payments: Stripe adapter

Usage:
    from payments.adapters import get_stripe_adapter
    from registration.services import RegistrationService

    result = RegistrationService(gateway=get_stripe_adapter()).complete_registration(
        user_id, data
    )
"""
