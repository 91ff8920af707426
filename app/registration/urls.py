"""
URL configuration for registration.

Mounted at /api/v1/users/.
"""

from django.urls import path

from registration import views

app_name = "registration"

urlpatterns = [
    path(
        "continue-registration-page-data/",
        views.ContinueRegistrationPageDataView.as_view(),
        name="page-data",
    ),
    path(
        "billing-status/",
        views.BillingStatusView.as_view(),
        name="billing-status",
    ),
    path(
        "continue-registration/",
        views.ContinueRegistrationView.as_view(),
        name="continue-registration",
    ),
    path(
        "setup-intent/",
        views.SetupIntentView.as_view(),
        name="setup-intent",
    ),
]
