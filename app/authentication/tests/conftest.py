"""
Test configuration and fixtures for authentication tests.

Usage:
    def test_example(user):
        assert user.company is not None
"""

import pytest

from authentication.models import User
from authentication.tests.factories import UserFactory


@pytest.fixture
def user(db):
    """Create a basic active user associated with a company."""
    return UserFactory()


@pytest.fixture
def user_without_company(db):
    """Create a user with no company association."""
    return UserFactory(company=None)


@pytest.fixture
def superuser(db):
    """Create a superuser with admin privileges."""
    return User.objects.create_superuser(
        email="admin@example.com", password="AdminPass123!"
    )
