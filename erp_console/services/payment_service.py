"""
Payment Service - Stripe checkout and payment intents

Forms take amounts in major units; the backend is sent integer cents.
"""
import logging
from typing import Any, Dict, List, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from erp_console.core.errors import FormValidationError
from erp_console.domain import (
    CheckoutForm, Payment, PaymentIntentForm, StripeCheckoutSession, StripePaymentIntent,
)
from erp_console.repositories.base import describe_validation_error
from erp_console.repositories.commerce_repository import PaymentsRepository, StripeRepository
from erp_console.services.journal_entry_service import to_cents

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=BaseModel)


def _parse_form(model: Type[F], data: Union[F, Dict[str, Any]]) -> F:
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise FormValidationError(describe_validation_error(e)) from e


def _cents(amount) -> int:
    cents = to_cents(amount)
    if cents <= 0:
        raise FormValidationError("Amount must be greater than zero")
    return cents


class PaymentService:
    def __init__(self, stripe: StripeRepository, payments: PaymentsRepository):
        self.stripe = stripe
        self.payments = payments

    async def create_checkout(self, data: Union[CheckoutForm, Dict[str, Any]]) -> StripeCheckoutSession:
        """
        Start a Stripe checkout session

        Raises:
            FormValidationError: missing customer or non-positive amount; nothing is sent
        """
        form = _parse_form(CheckoutForm, data)
        payload = {
            'customer_id': form.customer_id,
            'amount': _cents(form.amount),
            'currency': form.currency,
            'description': form.description or 'Payment',
            'success_url': form.success_url,
            'cancel_url': form.cancel_url,
        }
        if form.customer_email:
            payload['customer_email'] = form.customer_email
        logger.info(f"Creating checkout session for {form.customer_id} ({payload['amount']} cents)")
        return await self.stripe.create_checkout_session(payload)

    async def create_intent(self, data: Union[PaymentIntentForm, Dict[str, Any]]) -> StripePaymentIntent:
        form = _parse_form(PaymentIntentForm, data)
        payload = {
            'customer_id': form.customer_id,
            'amount': _cents(form.amount),
            'currency': form.currency,
        }
        if form.description:
            payload['description'] = form.description
        logger.info(f"Creating payment intent for {form.customer_id} ({payload['amount']} cents)")
        return await self.stripe.create_payment_intent(payload)

    async def history(self, customer_id: str) -> List[Payment]:
        if not (customer_id or '').strip():
            raise FormValidationError("Please enter a customer ID")
        return await self.payments.get_customer_payments(customer_id.strip())
