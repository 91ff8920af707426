"""
Django app configuration for registration.
"""

from django.apps import AppConfig


class RegistrationConfig(AppConfig):
    """Configuration for the registration application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "registration"
    verbose_name = "Registration"
