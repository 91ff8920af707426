"""
Stripe API adapter for billing operations.

This module provides the StripeAdapter class which encapsulates all
Stripe API interactions. All Stripe calls should go through this
adapter to ensure consistent error handling, timeouts, and observability.

Features:
- Explicit client configuration (no global ``stripe.api_key``)
- Configurable timeout on all API calls, no automatic network retries
- Automatic error translation to domain exceptions
- Structured logging with timing metrics

Configuration (via settings, read by StripeClientConfig.from_settings):
- STRIPE_SECRET_KEY: Stripe API secret key
- STRIPE_API_TIMEOUT_SECONDS: API call timeout (default: 10)

Usage:
    from payments.adapters import (
        CreateCustomerParams,
        CreateSubscriptionParams,
        get_stripe_adapter,
    )

    adapter = get_stripe_adapter()

    customer = adapter.create_customer(
        CreateCustomerParams(email="owner@example.com", name="Ada Lovelace")
    )
    adapter.attach_payment_method("pm_123", customer.id)
    adapter.set_default_payment_method(customer.id, "pm_123")
    subscription = adapter.create_subscription(
        CreateSubscriptionParams(
            customer_id=customer.id,
            price_id="price_basic",
            payment_method_id="pm_123",
        )
    )
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import stripe
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from payments.exceptions import (
    StripeAPIUnavailableError,
    StripeCardDeclinedError,
    StripeInsufficientFundsError,
    StripeInvalidRequestError,
    StripeRateLimitError,
)
from toolkit.helpers import mask_email

if TYPE_CHECKING:
    from collections.abc import Callable

    from authentication.models import User
    from companies.models import Company


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True)
class StripeClientConfig:
    """
    Connection settings for the Stripe API.

    Attributes:
        secret_key: Stripe API secret key (sk_...)
        timeout_seconds: HTTP timeout per API call
        max_network_retries: SDK-level retries; kept at 0
    """

    secret_key: str
    timeout_seconds: float = 10
    max_network_retries: int = 0

    @classmethod
    def from_settings(cls) -> StripeClientConfig:
        """Build the config from Django settings."""
        return cls(
            secret_key=settings.STRIPE_SECRET_KEY,
            timeout_seconds=getattr(settings, "STRIPE_API_TIMEOUT_SECONDS", 10),
        )

    def __repr__(self) -> str:
        # Never log the key itself
        return (
            f"StripeClientConfig(secret_key={'***' if self.secret_key else ''!r}, "
            f"timeout_seconds={self.timeout_seconds!r}, "
            f"max_network_retries={self.max_network_retries!r})"
        )


# =============================================================================
# Data Types
# =============================================================================


@dataclass
class CreateCustomerParams:
    """
    Parameters for creating a Stripe Customer.

    Attributes:
        email: Customer email (required)
        name: Full name shown on invoices
        phone: Contact phone number
        metadata: Key-value pairs to attach to the Customer
    """

    email: str
    name: str | None = None
    phone: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate parameters after initialization."""
        if not self.email:
            raise ValueError("email is required")

    @classmethod
    def for_registration(cls, user: User, company: Company) -> CreateCustomerParams:
        """Customer params for a user completing registration for a company."""
        return cls(
            email=user.email,
            name=user.get_full_name(),
            phone=user.phone or None,
            metadata={
                "user_id": str(user.pk),
                "company_id": str(company.pk),
                "company_name": company.name,
            },
        )


@dataclass
class CustomerResult:
    """
    Result from Stripe Customer creation.

    Attributes:
        id: Customer ID (cus_xxx); may be None if Stripe returned no id
        email: Customer email
        raw_response: Full Stripe response dict (for debugging)
    """

    id: str | None
    email: str | None = None
    raw_response: dict[str, Any] = field(default_factory=dict)


@dataclass
class CreateSubscriptionParams:
    """
    Parameters for creating a Stripe Subscription.

    Attributes:
        customer_id: Stripe Customer ID to bill
        price_id: Stripe Price ID of the plan
        payment_method_id: Default payment method for the subscription
        metadata: Key-value pairs to attach to the Subscription
    """

    customer_id: str
    price_id: str
    payment_method_id: str
    metadata: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate parameters after initialization."""
        if not self.customer_id:
            raise ValueError("customer_id is required")
        if not self.price_id:
            raise ValueError("price_id is required")
        if not self.payment_method_id:
            raise ValueError("payment_method_id is required")


@dataclass
class SubscriptionResult:
    """
    Result from Stripe Subscription creation.

    Attributes:
        id: Subscription ID (sub_xxx); may be None if Stripe returned no id
        status: Subscription status (active, incomplete, ...)
        latest_invoice_id: ID of the first invoice, if any
        raw_response: Full Stripe response dict
    """

    id: str | None
    status: str | None = None
    latest_invoice_id: str | None = None
    raw_response: dict[str, Any] = field(default_factory=dict)


@dataclass
class SetupIntentResult:
    """
    Result from Stripe SetupIntent creation.

    Attributes:
        id: SetupIntent ID (seti_xxx)
        client_secret: Secret the browser uses to confirm card details
        status: SetupIntent status
    """

    id: str
    client_secret: str
    status: str | None = None


def _to_dict(obj: Any) -> dict[str, Any]:
    to_dict = getattr(obj, "to_dict", None)
    return to_dict() if callable(to_dict) else {}


def _latest_invoice_id(subscription: Any) -> str | None:
    invoice = getattr(subscription, "latest_invoice", None)
    if invoice is None or isinstance(invoice, str):
        return invoice
    return getattr(invoice, "id", None)


# =============================================================================
# Stripe Adapter
# =============================================================================


class StripeAdapter:
    """
    Adapter for Stripe API calls needed to provision billing.

    Each instance owns a ``stripe.StripeClient`` built from its
    StripeClientConfig. The client is created on first use.

    Features:
    - Configurable timeouts on all API calls
    - Automatic error translation to domain exceptions
    - Structured logging with timing metrics

    Usage:
        adapter = StripeAdapter(StripeClientConfig.from_settings())
        result = adapter.create_customer(params)
    """

    def __init__(
        self,
        config: StripeClientConfig,
        client: stripe.StripeClient | None = None,
    ):
        self.config = config
        self._client = client

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def client(self) -> stripe.StripeClient:
        """The configured Stripe client, created on first access."""
        if self._client is None:
            if not self.config.secret_key:
                raise ImproperlyConfigured("STRIPE_SECRET_KEY is not set")
            self._client = stripe.StripeClient(
                self.config.secret_key,
                http_client=stripe.RequestsClient(timeout=self.config.timeout_seconds),
                max_network_retries=self.config.max_network_retries,
            )
        return self._client

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """Get logger for this adapter."""
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    # =========================================================================
    # Core Operations
    # =========================================================================

    def create_customer(self, params: CreateCustomerParams) -> CustomerResult:
        """
        Create a Stripe Customer.

        Args:
            params: Parameters for creating the Customer

        Returns:
            CustomerResult with the new customer ID

        Raises:
            StripeInvalidRequestError: Invalid parameters
            StripeAPIUnavailableError: Stripe service unavailable
        """
        request: dict[str, Any] = {"email": params.email, "metadata": params.metadata}
        if params.name:
            request["name"] = params.name
        if params.phone:
            request["phone"] = params.phone

        customer = self._execute(
            "create_customer",
            {"email": mask_email(params.email)},
            lambda: self.client.customers.create(params=request),
        )

        return CustomerResult(
            id=getattr(customer, "id", None),
            email=getattr(customer, "email", None),
            raw_response=_to_dict(customer),
        )

    def attach_payment_method(self, payment_method_id: str, customer_id: str) -> None:
        """
        Attach a PaymentMethod to a Customer.

        Raises:
            StripeCardDeclinedError: Card failed verification on attach
            StripeInvalidRequestError: Unknown or already-attached payment method
        """
        self._execute(
            "attach_payment_method",
            {"payment_method_id": payment_method_id, "customer_id": customer_id},
            lambda: self.client.payment_methods.attach(
                payment_method_id,
                params={"customer": customer_id},
            ),
        )

    def set_default_payment_method(self, customer_id: str, payment_method_id: str) -> None:
        """
        Make a PaymentMethod the Customer's default for invoices.

        Raises:
            StripeInvalidRequestError: Payment method not attached to customer
        """
        self._execute(
            "set_default_payment_method",
            {"payment_method_id": payment_method_id, "customer_id": customer_id},
            lambda: self.client.customers.update(
                customer_id,
                params={
                    "invoice_settings": {"default_payment_method": payment_method_id},
                },
            ),
        )

    def create_subscription(self, params: CreateSubscriptionParams) -> SubscriptionResult:
        """
        Create a Stripe Subscription on a single price.

        The first invoice and its payment intent are expanded in the
        response so the subscription status reflects the first charge.

        Returns:
            SubscriptionResult with subscription ID and status

        Raises:
            StripeCardDeclinedError: First payment declined
            StripeInsufficientFundsError: First payment declined for funds
            StripeInvalidRequestError: Unknown price or customer
        """
        request: dict[str, Any] = {
            "customer": params.customer_id,
            "items": [{"price": params.price_id}],
            "default_payment_method": params.payment_method_id,
            "expand": ["latest_invoice.payment_intent"],
        }
        if params.metadata:
            request["metadata"] = params.metadata

        subscription = self._execute(
            "create_subscription",
            {"customer_id": params.customer_id, "price_id": params.price_id},
            lambda: self.client.subscriptions.create(params=request),
        )

        return SubscriptionResult(
            id=getattr(subscription, "id", None),
            status=getattr(subscription, "status", None),
            latest_invoice_id=_latest_invoice_id(subscription),
            raw_response=_to_dict(subscription),
        )

    def create_setup_intent(self) -> SetupIntentResult:
        """
        Create a card SetupIntent for collecting a payment method.

        Returns:
            SetupIntentResult with the client_secret for the browser
        """
        intent = self._execute(
            "create_setup_intent",
            {},
            lambda: self.client.setup_intents.create(
                params={"payment_method_types": ["card"]},
            ),
        )

        return SetupIntentResult(
            id=intent.id,
            client_secret=intent.client_secret,
            status=getattr(intent, "status", None),
        )

    # =========================================================================
    # Execution
    # =========================================================================

    def _execute(
        self,
        operation: str,
        log_context: dict[str, Any],
        call: Callable[[], Any],
    ) -> Any:
        """
        Run a Stripe call with timing, logging and error translation.

        Only Stripe SDK errors are translated; anything else propagates
        unchanged.
        """
        logger = self.get_logger()
        log_context = {"operation": operation, **log_context}

        start_time = time.time()
        logger.info("Starting Stripe operation", extra=log_context)

        try:
            response = call()
        except stripe.StripeError as e:
            duration_ms = (time.time() - start_time) * 1000
            self._handle_stripe_error(e, log_context, duration_ms)
            raise  # Never reached, but satisfies type checker

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            "Stripe operation completed",
            extra={
                **log_context,
                "stripe_id": getattr(response, "id", None),
                "duration_ms": duration_ms,
            },
        )
        return response

    # =========================================================================
    # Error Handling
    # =========================================================================

    @classmethod
    def _handle_stripe_error(
        cls,
        error: stripe.StripeError,
        log_context: dict[str, Any],
        duration_ms: float,
    ) -> None:
        """
        Translate Stripe exceptions to domain exceptions.

        Args:
            error: The Stripe exception
            log_context: Logging context dict
            duration_ms: Operation duration for logging

        Raises:
            StripeCardDeclinedError: Card was declined
            StripeInsufficientFundsError: Insufficient funds
            StripeInvalidRequestError: Invalid request parameters or API key
            StripeRateLimitError: Rate limited
            StripeAPIUnavailableError: API unavailable or unknown Stripe error
        """
        logger = cls.get_logger()

        log_context = {**log_context, "duration_ms": duration_ms}

        if isinstance(error, stripe.CardError):
            decline_code = _decline_code(error)
            logger.warning(
                "Card error from Stripe",
                extra={**log_context, "decline_code": decline_code},
            )

            if decline_code == "insufficient_funds":
                raise StripeInsufficientFundsError(
                    str(error.user_message or error),
                    stripe_code=error.code,
                    decline_code=decline_code,
                ) from error

            raise StripeCardDeclinedError(
                str(error.user_message or error),
                stripe_code=error.code,
                decline_code=decline_code,
            ) from error

        elif isinstance(error, stripe.InvalidRequestError):
            logger.error(
                "Invalid request to Stripe",
                extra={**log_context, "stripe_code": error.code},
            )
            raise StripeInvalidRequestError(
                str(error.user_message or error),
                stripe_code=error.code,
            ) from error

        elif isinstance(error, stripe.RateLimitError):
            logger.warning("Rate limited by Stripe", extra=log_context)
            raise StripeRateLimitError(
                "Stripe rate limit exceeded. Please retry.",
                stripe_code="rate_limit",
            ) from error

        elif isinstance(error, stripe.APIConnectionError):
            logger.error(
                "Connection error to Stripe",
                extra=log_context,
                exc_info=True,
            )
            raise StripeAPIUnavailableError(
                "Could not connect to Stripe. Please retry.",
                stripe_code="api_connection_error",
            ) from error

        elif isinstance(error, stripe.APIError):
            logger.error(
                "Stripe API error",
                extra=log_context,
                exc_info=True,
            )
            raise StripeAPIUnavailableError(
                "Stripe service error. Please retry.",
                stripe_code="api_error",
            ) from error

        elif isinstance(error, stripe.AuthenticationError):
            logger.critical(
                "Stripe authentication failed - check API key",
                extra=log_context,
            )
            raise StripeInvalidRequestError(
                "Stripe authentication failed",
                stripe_code="authentication_error",
            ) from error

        else:
            logger.error(
                f"Unexpected error from Stripe: {type(error).__name__}",
                extra=log_context,
                exc_info=True,
            )
            raise StripeAPIUnavailableError(
                f"Unexpected Stripe error: {error.user_message or error}",
                stripe_code="unknown_error",
            ) from error


def _decline_code(error: stripe.CardError) -> str | None:
    decline_code = getattr(error, "decline_code", None)
    if decline_code is None and getattr(error, "error", None) is not None:
        decline_code = getattr(error.error, "decline_code", None)
    return decline_code


@lru_cache(maxsize=1)
def get_stripe_adapter() -> StripeAdapter:
    """
    Return the process-wide adapter built from settings.

    Tests that change Stripe settings should call
    ``get_stripe_adapter.cache_clear()``.
    """
    return StripeAdapter(StripeClientConfig.from_settings())
