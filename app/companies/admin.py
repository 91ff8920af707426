"""
Django admin configuration for company models.
"""

from django.contrib import admin

from companies.models import Company


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    """Admin configuration for Company model."""

    list_display = (
        "name",
        "avatar_type",
        "stripe_customer_id",
        "stripe_subscription_id",
        "created_at",
    )
    list_filter = ("avatar_type", "created_at")
    search_fields = ("name", "stripe_customer_id", "stripe_subscription_id")
    ordering = ("-created_at",)
    readonly_fields = ("created_at", "updated_at")
