"""
Tests for toolkit app.

This package contains test modules for:
- test_helpers.py: Email masking tests
- test_validators.py: Phone number validator tests
- test_protocols.py: BillingGateway protocol tests

Usage:
    pytest app/toolkit/tests/
"""
