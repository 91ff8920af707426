"""
Tests for the authentication app.

- test_models.py: User model tests
- test_managers.py: UserManager tests
- test_views.py: JWT token endpoint tests
"""
