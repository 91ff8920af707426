"""
Registration services.

This module contains the business logic behind the continue-registration
page:

- RegistrationService: Completes registration by updating the user's
  profile and provisioning Stripe billing for their company
- RegistrationQueryService: Read-only lookups for the page

Completion flow:
    1. Load the user together with their company
    2. Check the payment method and plan were supplied
    3. Apply profile fields to the user and company type to the company
    4. Create a Stripe customer
    5. Attach the payment method and make it the default
    6. Create the subscription
    7. Record both Stripe IDs on the company
    8. Save company then user in one transaction

Stripe objects created before a later failure are not rolled back, and
nothing is retried.

Usage:
    from payments.adapters import get_stripe_adapter
    from registration.services import RegistrationQueryService, RegistrationService

    service = RegistrationService(gateway=get_stripe_adapter())
    result = service.complete_registration(request.user.pk, data)

    if RegistrationQueryService.has_billing_setup(request.user.pk):
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from authentication.models import User
from companies.models import Company
from core.exceptions import InternalServiceError, NotFoundError, PreconditionFailedError
from core.services import BaseService, ServiceResult
from payments.adapters import CreateCustomerParams, CreateSubscriptionParams
from payments.exceptions import StripeError
from registration.types import BillingProvisioning, PageBootstrapData
from toolkit.helpers import mask_email

if TYPE_CHECKING:
    from payments.adapters import SetupIntentResult
    from registration.types import RegistrationCompletionInput
    from toolkit.protocols import BillingGateway


def _load_user_with_company(user_id: int) -> User | None:
    return User.objects.select_related("company").filter(pk=user_id).first()


class RegistrationService(BaseService):
    """
    Completes user registration and provisions billing.

    The payment gateway is passed in; the service never builds its own.

    Usage:
        service = RegistrationService(gateway=get_stripe_adapter())
        result = service.complete_registration(user_id, data)
        if not result.success:
            status_code = status_for_error_code(result.error_code)
    """

    def __init__(self, gateway: BillingGateway):
        self.gateway = gateway

    def complete_registration(
        self,
        user_id: int,
        data: RegistrationCompletionInput,
    ) -> ServiceResult[User]:
        """
        Update the user's profile and set up a subscription for their company.

        Args:
            user_id: ID of the authenticated user
            data: Submitted profile and billing details

        Returns:
            ServiceResult containing the saved User on success. Failures
            carry one of:
            - NOT_FOUND: "User not found"
            - PRECONDITION_FAILED: missing input, no company, Stripe
              rejected a call, or Stripe returned an object without an id
            - INTERNAL_ERROR: anything unexpected

        Note:
            Nothing is saved unless every Stripe call succeeds. A Stripe
            customer created before a later failure is left in place.
        """
        logger = self.get_logger()

        try:
            user = _load_user_with_company(user_id)
            if user is None:
                return ServiceResult.failure(
                    "User not found",
                    error_code=NotFoundError.default_error_code,
                )

            company = user.company
            if company is None:
                return ServiceResult.failure(
                    "User has no associated company",
                    error_code=PreconditionFailedError.default_error_code,
                )

            validation = self.validate_required(
                payment_method_id=data.payment_method_id,
                price_id=data.price_id,
            )
            if validation is not None:
                return validation

            user.first_name = data.first_name
            user.last_name = data.last_name
            user.phone = data.phone
            company.avatar_type = data.avatar_type

            logger.info(
                "Provisioning billing for registration",
                extra={
                    "user_id": user.pk,
                    "company_id": company.pk,
                    "email": mask_email(user.email),
                    "price_id": data.price_id,
                },
            )

            billing = self._provision_billing(user, company, data)
            if not billing.success:
                return billing

            company.record_billing(billing.data.customer_id, billing.data.subscription_id)

            with self.atomic():
                company.save()
                user.save()

        except StripeError as e:
            logger.warning(
                "Stripe rejected registration billing",
                extra={
                    "user_id": user_id,
                    "error_code": e.error_code,
                    "stripe_code": e.stripe_code,
                    "retryable": e.is_retryable,
                },
            )
            return ServiceResult.failure(
                f"Stripe error: {e.message}",
                error_code=PreconditionFailedError.default_error_code,
            )

        except Exception as e:
            logger.error(
                f"Unexpected error completing registration: {type(e).__name__}",
                extra={"user_id": user_id},
                exc_info=True,
            )
            return ServiceResult.failure(
                f"An unexpected error occurred: {e}",
                error_code=InternalServiceError.default_error_code,
            )

        logger.info(
            "Registration completed",
            extra={
                "user_id": user.pk,
                "company_id": company.pk,
                "stripe_customer_id": company.stripe_customer_id,
                "stripe_subscription_id": company.stripe_subscription_id,
            },
        )
        return ServiceResult.success(user)

    def _provision_billing(
        self,
        user: User,
        company: Company,
        data: RegistrationCompletionInput,
    ) -> ServiceResult[BillingProvisioning]:
        """Run the Stripe calls in order, stopping at the first incomplete result."""
        customer = self.gateway.create_customer(
            CreateCustomerParams.for_registration(user, company)
        )
        if customer is None or not customer.id:
            return ServiceResult.failure(
                "Failed to create Stripe customer",
                error_code=PreconditionFailedError.default_error_code,
            )

        self.gateway.attach_payment_method(data.payment_method_id, customer.id)
        self.gateway.set_default_payment_method(customer.id, data.payment_method_id)

        subscription = self.gateway.create_subscription(
            CreateSubscriptionParams(
                customer_id=customer.id,
                price_id=data.price_id,
                payment_method_id=data.payment_method_id,
                metadata={"company_id": str(company.pk)},
            )
        )
        if subscription is None or not subscription.id:
            self.get_logger().warning(
                "Stripe subscription created without an id",
                extra={"company_id": company.pk, "stripe_customer_id": customer.id},
            )
            return ServiceResult.failure(
                "Failed to create Stripe subscription",
                error_code=PreconditionFailedError.default_error_code,
            )

        return ServiceResult.success(
            BillingProvisioning(customer_id=customer.id, subscription_id=subscription.id)
        )

    def create_setup_intent(self) -> ServiceResult[SetupIntentResult]:
        """
        Create a card SetupIntent so the browser can collect a payment method.

        Returns:
            ServiceResult containing the SetupIntentResult (with client_secret)
        """
        try:
            intent = self.gateway.create_setup_intent()
        except StripeError as e:
            self.get_logger().warning(
                "Stripe rejected setup intent",
                extra={"error_code": e.error_code, "stripe_code": e.stripe_code},
            )
            return ServiceResult.failure(
                f"Stripe error: {e.message}",
                error_code=PreconditionFailedError.default_error_code,
            )
        except Exception as e:
            self.get_logger().error(
                f"Unexpected error creating setup intent: {type(e).__name__}",
                exc_info=True,
            )
            return ServiceResult.failure(
                f"An unexpected error occurred: {e}",
                error_code=InternalServiceError.default_error_code,
            )

        return ServiceResult.success(intent)


class RegistrationQueryService(BaseService):
    """
    Read-only lookups for the continue-registration page.

    All methods are class methods - no instance state is maintained.
    """

    @classmethod
    def get_page_bootstrap_data(cls, user_id: int) -> ServiceResult[PageBootstrapData]:
        """
        Return the data used to pre-fill the continue-registration page.

        Returns:
            ServiceResult containing PageBootstrapData, a NOT_FOUND
            failure if the user does not exist, or INTERNAL_ERROR if the
            lookup itself fails
        """
        try:
            user = _load_user_with_company(user_id)
        except Exception:
            cls.get_logger().error(
                "Error fetching continue registration page data",
                extra={"user_id": user_id},
                exc_info=True,
            )
            return ServiceResult.failure(
                "An error occurred while fetching continue registration page data",
                error_code=InternalServiceError.default_error_code,
            )

        if user is None:
            return ServiceResult.failure(
                "User not found",
                error_code=NotFoundError.default_error_code,
            )

        return ServiceResult.success(
            PageBootstrapData(
                email=user.email,
                company_name=user.company.name if user.company else None,
                first_name=user.first_name,
                last_name=user.last_name,
                phone=user.phone,
            )
        )

    @classmethod
    def has_billing_setup(cls, user_id: int) -> bool:
        """
        Whether the user's company has both Stripe identifiers.

        False when the user or their company does not exist.
        """
        company = Company.objects.filter(users__pk=user_id).first()
        return company is not None and company.has_billing_setup
