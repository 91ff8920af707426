"""
Toolkit - Domain-Specific Utilities.

This app provides domain-aware utilities shared across apps:
- Validators: Phone number validation
- Helper functions: PII masking for logs
- Protocols: Domain-specific service interfaces (billing gateway)

Key components:
    - validators.py: PII validation (validate_phone_number)
    - helpers.py: mask_email
    - protocols.py: BillingGateway

Usage:
    from toolkit.helpers import mask_email
    from toolkit.protocols import BillingGateway
    from toolkit.validators import validate_phone_number

Note:
    - This app has no models.
    - For generic infrastructure (ServiceResult, exceptions), see core/
"""
