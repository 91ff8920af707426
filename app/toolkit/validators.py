"""
Custom validators for domain-specific input.

This module provides validators for:
- Phone numbers (PII validation)

Usage:
    from toolkit.validators import validate_phone_number

    class ContinueRegistrationSerializer(serializers.Serializer):
        phone = serializers.CharField(validators=[validate_phone_number])
"""

from __future__ import annotations

import re

from django.core.exceptions import ValidationError

# Optional +country code (1-3 digits), then 3-3-4 digits with optional
# parentheses around the area code and -, . or space separators.
PHONE_NUMBER_PATTERN = re.compile(
    r"^(\+\d{1,3}[-.]?)?\(?([0-9]{3})\)?[-. ]?([0-9]{3})[-. ]?([0-9]{4})$"
)


def validate_phone_number(value: str):
    """
    Validate phone number format.

    Accepts formats:
    - 5551234567
    - 555-123-4567
    - (555) 123-4567
    - 555.123.4567
    - +1-555-123-4567

    A space directly after the country code is not accepted.

    Args:
        value: Phone number string to validate

    Raises:
        ValidationError: If format is invalid
    """
    if not PHONE_NUMBER_PATTERN.match(value or ""):
        raise ValidationError(
            "Enter a valid phone number.",
            code="invalid_phone",
        )
