"""
Tests for Stripe adapter.

Tests cover:
- Parameter dataclass validation
- Client construction from config
- Successful API operations and the exact Stripe requests sent
- Error translation for each exception type
"""

from unittest.mock import patch

import pytest
import stripe
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings

from authentication.tests.factories import UserFactory
from payments.adapters import (
    CreateCustomerParams,
    CreateSubscriptionParams,
    CustomerResult,
    SetupIntentResult,
    StripeAdapter,
    StripeClientConfig,
    SubscriptionResult,
    get_stripe_adapter,
)
from payments.adapters.tests.conftest import MockStripeObject
from payments.exceptions import (
    StripeAPIUnavailableError,
    StripeCardDeclinedError,
    StripeError,
    StripeInsufficientFundsError,
    StripeInvalidRequestError,
    StripeRateLimitError,
)


# =============================================================================
# Params Tests
# =============================================================================


class TestCreateCustomerParams:
    """Tests for CreateCustomerParams validation and builders."""

    def test_email_required(self):
        """Should raise ValueError for empty email."""
        with pytest.raises(ValueError, match="email is required"):
            CreateCustomerParams(email="")

    def test_for_registration_uses_user_and_company(self, db):
        """Builder copies contact details and links back to local records."""
        user = UserFactory(
            email="ada@example.com",
            first_name="Ada",
            last_name="Lovelace",
            phone="555-123-4567",
        )

        params = CreateCustomerParams.for_registration(user, user.company)

        assert params.email == "ada@example.com"
        assert params.name == "Ada Lovelace"
        assert params.phone == "555-123-4567"
        assert params.metadata == {
            "user_id": str(user.pk),
            "company_id": str(user.company.pk),
            "company_name": user.company.name,
        }

    def test_for_registration_omits_blank_phone(self, db):
        user = UserFactory(phone="")

        params = CreateCustomerParams.for_registration(user, user.company)

        assert params.phone is None


class TestCreateSubscriptionParams:
    """Tests for CreateSubscriptionParams validation."""

    def test_valid_params(self):
        params = CreateSubscriptionParams(
            customer_id="cus_1",
            price_id="price_basic",
            payment_method_id="pm_1",
        )

        assert params.metadata == {}

    @pytest.mark.parametrize(
        "field_name",
        ["customer_id", "price_id", "payment_method_id"],
    )
    def test_each_identifier_required(self, field_name):
        """Should raise ValueError naming the empty identifier."""
        values = {
            "customer_id": "cus_1",
            "price_id": "price_basic",
            "payment_method_id": "pm_1",
        }
        values[field_name] = ""

        with pytest.raises(ValueError, match=f"{field_name} is required"):
            CreateSubscriptionParams(**values)


# =============================================================================
# Client Configuration Tests
# =============================================================================


class TestStripeClientConfig:
    """Tests for StripeClientConfig."""

    @override_settings(STRIPE_SECRET_KEY="sk_test_settings", STRIPE_API_TIMEOUT_SECONDS=7)
    def test_from_settings(self):
        config = StripeClientConfig.from_settings()

        assert config.secret_key == "sk_test_settings"
        assert config.timeout_seconds == 7
        assert config.max_network_retries == 0

    def test_repr_hides_secret_key(self):
        config = StripeClientConfig(secret_key="sk_test_secret")

        assert "sk_test_secret" not in repr(config)


class TestStripeAdapterClient:
    """Tests for lazy StripeClient construction."""

    def test_builds_client_with_timeout_and_no_retries(self, stripe_config):
        """Client gets the secret key, a timed HTTP client, and zero retries."""
        with (
            patch("payments.adapters.stripe_adapter.stripe.StripeClient") as client_cls,
            patch("payments.adapters.stripe_adapter.stripe.RequestsClient") as http_cls,
        ):
            adapter = StripeAdapter(stripe_config)
            client = adapter.client

        http_cls.assert_called_once_with(timeout=5)
        client_cls.assert_called_once_with(
            "sk_test_123",
            http_client=http_cls.return_value,
            max_network_retries=0,
        )
        assert client is client_cls.return_value

    def test_client_is_created_once(self, stripe_config):
        with (
            patch("payments.adapters.stripe_adapter.stripe.StripeClient") as client_cls,
            patch("payments.adapters.stripe_adapter.stripe.RequestsClient"),
        ):
            adapter = StripeAdapter(stripe_config)
            assert adapter.client is adapter.client

        assert client_cls.call_count == 1

    def test_missing_secret_key_is_improperly_configured(self):
        adapter = StripeAdapter(StripeClientConfig(secret_key=""))

        with pytest.raises(ImproperlyConfigured):
            adapter.create_setup_intent()

    @override_settings(STRIPE_SECRET_KEY="sk_test_cached")
    def test_get_stripe_adapter_is_cached(self):
        get_stripe_adapter.cache_clear()
        try:
            first = get_stripe_adapter()
            second = get_stripe_adapter()
        finally:
            get_stripe_adapter.cache_clear()

        assert first is second
        assert first.config.secret_key == "sk_test_cached"


# =============================================================================
# StripeAdapter Operation Tests
# =============================================================================


class TestCreateCustomer:
    """Tests for StripeAdapter.create_customer()."""

    def test_sends_contact_details(self, adapter, mock_stripe_client):
        params = CreateCustomerParams(
            email="owner@example.com",
            name="Ada Lovelace",
            phone="555-123-4567",
            metadata={"company_id": "1"},
        )

        adapter.create_customer(params)

        mock_stripe_client.customers.create.assert_called_once_with(
            params={
                "email": "owner@example.com",
                "metadata": {"company_id": "1"},
                "name": "Ada Lovelace",
                "phone": "555-123-4567",
            }
        )

    def test_omits_empty_optional_fields(self, adapter, mock_stripe_client):
        adapter.create_customer(CreateCustomerParams(email="owner@example.com"))

        sent = mock_stripe_client.customers.create.call_args.kwargs["params"]
        assert "name" not in sent
        assert "phone" not in sent

    def test_returns_customer_result(self, adapter):
        result = adapter.create_customer(CreateCustomerParams(email="owner@example.com"))

        assert isinstance(result, CustomerResult)
        assert result.id == "cus_test123456"
        assert result.email == "owner@example.com"
        assert result.raw_response["object"] == "customer"

    def test_missing_id_is_passed_through(self, adapter, mock_stripe_client, mock_customer):
        """A response without an id yields a result with id None."""
        mock_stripe_client.customers.create.return_value = mock_customer(id=None)

        result = adapter.create_customer(CreateCustomerParams(email="owner@example.com"))

        assert result.id is None


class TestAttachPaymentMethod:
    """Tests for StripeAdapter.attach_payment_method()."""

    def test_attaches_to_customer(self, adapter, mock_stripe_client):
        adapter.attach_payment_method("pm_1", "cus_1")

        mock_stripe_client.payment_methods.attach.assert_called_once_with(
            "pm_1",
            params={"customer": "cus_1"},
        )


class TestSetDefaultPaymentMethod:
    """Tests for StripeAdapter.set_default_payment_method()."""

    def test_updates_invoice_settings(self, adapter, mock_stripe_client):
        adapter.set_default_payment_method("cus_1", "pm_1")

        mock_stripe_client.customers.update.assert_called_once_with(
            "cus_1",
            params={"invoice_settings": {"default_payment_method": "pm_1"}},
        )


class TestCreateSubscription:
    """Tests for StripeAdapter.create_subscription()."""

    def test_sends_single_price_item_with_expansion(self, adapter, mock_stripe_client):
        adapter.create_subscription(
            CreateSubscriptionParams(
                customer_id="cus_1",
                price_id="price_basic",
                payment_method_id="pm_1",
            )
        )

        mock_stripe_client.subscriptions.create.assert_called_once_with(
            params={
                "customer": "cus_1",
                "items": [{"price": "price_basic"}],
                "default_payment_method": "pm_1",
                "expand": ["latest_invoice.payment_intent"],
            }
        )

    def test_returns_subscription_result(self, adapter):
        result = adapter.create_subscription(
            CreateSubscriptionParams(
                customer_id="cus_1",
                price_id="price_basic",
                payment_method_id="pm_1",
            )
        )

        assert isinstance(result, SubscriptionResult)
        assert result.id == "sub_test123456"
        assert result.status == "active"
        assert result.latest_invoice_id == "in_test123456"

    def test_reads_expanded_invoice_id(self, adapter, mock_stripe_client, mock_subscription):
        """An expanded latest_invoice object yields its id."""
        mock_stripe_client.subscriptions.create.return_value = mock_subscription(
            latest_invoice=MockStripeObject({"id": "in_expanded", "object": "invoice"})
        )

        result = adapter.create_subscription(
            CreateSubscriptionParams(
                customer_id="cus_1",
                price_id="price_basic",
                payment_method_id="pm_1",
            )
        )

        assert result.latest_invoice_id == "in_expanded"


class TestCreateSetupIntent:
    """Tests for StripeAdapter.create_setup_intent()."""

    def test_creates_card_setup_intent(self, adapter, mock_stripe_client):
        result = adapter.create_setup_intent()

        mock_stripe_client.setup_intents.create.assert_called_once_with(
            params={"payment_method_types": ["card"]},
        )
        assert isinstance(result, SetupIntentResult)
        assert result.id == "seti_test123456"
        assert result.client_secret == "seti_test123456_secret_abc"


# =============================================================================
# StripeAdapter Error Translation Tests
# =============================================================================


class TestStripeAdapterErrorTranslation:
    """Tests for Stripe error translation to domain exceptions."""

    def test_card_declined_error(self, adapter, mock_stripe_client, card_error):
        """Should translate CardError to StripeCardDeclinedError."""
        mock_stripe_client.payment_methods.attach.side_effect = card_error()

        with pytest.raises(StripeCardDeclinedError) as exc_info:
            adapter.attach_payment_method("pm_1", "cus_1")

        assert exc_info.value.message == "Your card was declined."
        assert exc_info.value.decline_code == "generic_decline"
        assert exc_info.value.stripe_code == "card_declined"
        assert exc_info.value.is_retryable is False

    def test_insufficient_funds_error(
        self, adapter, mock_stripe_client, insufficient_funds_error
    ):
        """Should translate insufficient funds to StripeInsufficientFundsError."""
        mock_stripe_client.subscriptions.create.side_effect = insufficient_funds_error

        with pytest.raises(StripeInsufficientFundsError) as exc_info:
            adapter.create_subscription(
                CreateSubscriptionParams(
                    customer_id="cus_1",
                    price_id="price_basic",
                    payment_method_id="pm_1",
                )
            )

        assert exc_info.value.decline_code == "insufficient_funds"

    def test_invalid_request_error(
        self, adapter, mock_stripe_client, invalid_request_error
    ):
        """Should translate InvalidRequestError to StripeInvalidRequestError."""
        mock_stripe_client.payment_methods.attach.side_effect = invalid_request_error()

        with pytest.raises(StripeInvalidRequestError) as exc_info:
            adapter.attach_payment_method("pm_missing", "cus_1")

        assert exc_info.value.message == "No such PaymentMethod: 'pm_missing'"
        assert exc_info.value.stripe_code == "resource_missing"
        assert exc_info.value.is_retryable is False

    def test_rate_limit_error(self, adapter, mock_stripe_client, rate_limit_error):
        """Should translate RateLimitError to StripeRateLimitError."""
        mock_stripe_client.customers.create.side_effect = rate_limit_error

        with pytest.raises(StripeRateLimitError) as exc_info:
            adapter.create_customer(CreateCustomerParams(email="owner@example.com"))

        assert exc_info.value.is_retryable is True

    def test_api_connection_error(
        self, adapter, mock_stripe_client, api_connection_error
    ):
        """Should translate APIConnectionError to StripeAPIUnavailableError."""
        mock_stripe_client.customers.update.side_effect = api_connection_error

        with pytest.raises(StripeAPIUnavailableError) as exc_info:
            adapter.set_default_payment_method("cus_1", "pm_1")

        assert exc_info.value.stripe_code == "api_connection_error"
        assert exc_info.value.is_retryable is True

    def test_api_error(self, adapter, mock_stripe_client, api_error):
        """Should translate APIError to StripeAPIUnavailableError."""
        mock_stripe_client.setup_intents.create.side_effect = api_error

        with pytest.raises(StripeAPIUnavailableError) as exc_info:
            adapter.create_setup_intent()

        assert exc_info.value.stripe_code == "api_error"

    def test_authentication_error(
        self, adapter, mock_stripe_client, authentication_error
    ):
        """Should translate AuthenticationError to StripeInvalidRequestError."""
        mock_stripe_client.customers.create.side_effect = authentication_error

        with pytest.raises(StripeInvalidRequestError) as exc_info:
            adapter.create_customer(CreateCustomerParams(email="owner@example.com"))

        assert exc_info.value.stripe_code == "authentication_error"

    def test_unknown_stripe_error(self, adapter, mock_stripe_client):
        """Unclassified Stripe errors become StripeAPIUnavailableError."""
        mock_stripe_client.customers.create.side_effect = stripe.IdempotencyError(
            message="Keys for idempotent requests can only be used once."
        )

        with pytest.raises(StripeAPIUnavailableError) as exc_info:
            adapter.create_customer(CreateCustomerParams(email="owner@example.com"))

        assert exc_info.value.stripe_code == "unknown_error"

    def test_translated_errors_are_stripe_errors(
        self, adapter, mock_stripe_client, card_error
    ):
        """Every translated error shares the StripeError base."""
        mock_stripe_client.payment_methods.attach.side_effect = card_error()

        with pytest.raises(StripeError):
            adapter.attach_payment_method("pm_1", "cus_1")

    def test_non_stripe_errors_propagate_unchanged(self, adapter, mock_stripe_client):
        """Only SDK errors are translated."""
        mock_stripe_client.customers.create.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            adapter.create_customer(CreateCustomerParams(email="owner@example.com"))


# =============================================================================
# Logging Tests
# =============================================================================


class TestStripeAdapterLogging:
    """Structured logging around each call."""

    def test_logs_start_and_completion_with_timing(self, adapter, caplog):
        with caplog.at_level("INFO", logger="payments.adapters.stripe_adapter"):
            adapter.attach_payment_method("pm_1", "cus_1")

        messages = [record.getMessage() for record in caplog.records]
        assert messages == ["Starting Stripe operation", "Stripe operation completed"]
        completed = caplog.records[-1]
        assert completed.operation == "attach_payment_method"
        assert completed.duration_ms >= 0

    def test_logs_card_errors_as_warnings(
        self, adapter, mock_stripe_client, card_error, caplog
    ):
        mock_stripe_client.payment_methods.attach.side_effect = card_error()

        with caplog.at_level("INFO", logger="payments.adapters.stripe_adapter"):
            with pytest.raises(StripeCardDeclinedError):
                adapter.attach_payment_method("pm_1", "cus_1")

        warning = caplog.records[-1]
        assert warning.levelname == "WARNING"
        assert warning.decline_code == "generic_decline"
