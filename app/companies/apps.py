"""
Django app configuration for companies.
"""

from django.apps import AppConfig


class CompaniesConfig(AppConfig):
    """Configuration for the companies application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "companies"
    verbose_name = "Companies"
