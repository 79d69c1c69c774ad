"""
Unit tests for Stripe checkout and payment intent submission
"""
import asyncio

import pytest

from conftest import request_json
from erp_console.core.errors import FormValidationError
from erp_console.services.payment_service import PaymentService

STRIPE = "/api/v1/stripe"


@pytest.fixture
def service(api):
    return PaymentService(api.stripe, api.payments)


@pytest.fixture
def checkout_form():
    return {
        "customer_id": "c-1",
        "amount": "49.99",
        "currency": "USD",
        "success_url": "http://console.test/payments?session_id={CHECKOUT_SESSION_ID}",
        "cancel_url": "http://console.test/payments?canceled=true",
    }


class TestCheckout:
    def test_amount_sent_in_cents_with_default_description(self, backend, service, checkout_form):
        backend.add("POST", f"{STRIPE}/checkout", json={"id": "cs-1", "amount": 4999})

        session = asyncio.run(service.create_checkout(checkout_form))

        assert session.amount == 4999
        body = request_json(backend.requests[0])
        assert body["amount"] == 4999
        assert body["description"] == "Payment"
        assert "customer_email" not in body

    @pytest.mark.parametrize("amount", ["0", "-5", "0.001", "ten"])
    def test_bad_amount_sends_nothing(self, backend, service, checkout_form, amount):
        checkout_form["amount"] = amount

        with pytest.raises(FormValidationError):
            asyncio.run(service.create_checkout(checkout_form))

        assert backend.requests == []

    def test_missing_customer_sends_nothing(self, backend, service, checkout_form):
        checkout_form["customer_id"] = ""

        with pytest.raises(FormValidationError):
            asyncio.run(service.create_checkout(checkout_form))

        assert backend.requests == []


class TestIntentAndHistory:
    def test_intent_omits_blank_description(self, backend, service):
        backend.add("POST", f"{STRIPE}/intents", json={
            "id": "pi-1", "client_secret": "pi_secret", "amount": 1250,
        })

        intent = asyncio.run(service.create_intent({"customer_id": "c-1", "amount": 12.5}))

        assert intent.client_secret == "pi_secret"
        assert request_json(backend.requests[0]) == {"customer_id": "c-1", "amount": 1250, "currency": "USD"}

    def test_history_needs_customer(self, backend, service):
        with pytest.raises(FormValidationError) as exc_info:
            asyncio.run(service.history("  "))

        assert str(exc_info.value) == "Please enter a customer ID"
        assert backend.requests == []
