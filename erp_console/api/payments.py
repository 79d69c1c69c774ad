"""
Stripe payments page
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from erp_console.api.deps import get_api
from erp_console.repositories.erp_api import ErpApi
from erp_console.services.payment_service import PaymentService

router = APIRouter(prefix="/console/payments", tags=["Payments"])


def _service(api: ErpApi) -> PaymentService:
    return PaymentService(api.stripe, api.payments)


@router.get("/config")
async def stripe_config(api: ErpApi = Depends(get_api)):
    return {"publishable_key": await api.stripe.get_publishable_key()}


@router.post("/checkout", status_code=201)
async def create_checkout(data: Dict[str, Any] = Body(...), api: ErpApi = Depends(get_api)):
    """
    Start a checkout session

    Body: {customer_id, amount (major units), currency, description,
    customer_email, success_url, cancel_url}
    """
    session = await _service(api).create_checkout(data)
    return {"message": "Checkout session created", "data": session}


@router.post("/intents", status_code=201)
async def create_intent(data: Dict[str, Any] = Body(...), api: ErpApi = Depends(get_api)):
    intent = await _service(api).create_intent(data)
    return {"message": "Payment intent created", "data": intent}


@router.get("/customers/{customer_id}")
async def payment_history(customer_id: str, api: ErpApi = Depends(get_api)):
    return {"items": await _service(api).history(customer_id)}
