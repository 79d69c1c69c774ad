"""
Point of Sale, E-commerce and Payment Domain Models

POS and e-commerce totals arrive in major units; payment and Stripe amounts
are integer cents.
"""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from erp_console.domain.common import WireModel


# ==================== POINT OF SALE ====================

class POSStore(WireModel):
    id: str
    store_code: str
    name: str
    city: Optional[str] = None
    status: str = "Active"


class POSStoreCreate(BaseModel):
    store_code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    postal_code: str = Field(..., min_length=1)
    country: str = "USA"
    phone: Optional[str] = None
    email: Optional[str] = None


class POSTransaction(WireModel):
    id: str
    transaction_number: str
    store_id: Optional[str] = None
    transaction_type: Optional[str] = None
    total: float = 0
    status: Optional[str] = None


# ==================== E-COMMERCE ====================

class EcommercePlatform(WireModel):
    id: str
    name: str
    platform_type: Optional[str] = None
    status: Optional[str] = None
    last_sync_at: Optional[str] = None


class EcommercePlatformCreate(BaseModel):
    name: str = Field(..., min_length=1)
    platform_type: str = "Shopify"
    base_url: str = Field(..., min_length=1)
    api_key: Optional[str] = None
    api_secret: Optional[str] = None


class EcommerceOrder(WireModel):
    id: str
    order_number: str
    platform_id: Optional[str] = None
    status: Optional[str] = None
    total: float = 0
    sync_status: Optional[str] = None


# ==================== PAYMENTS ====================

class Payment(WireModel):
    id: str
    payment_number: Optional[str] = None
    amount: int = 0
    status: Optional[str] = None
    paid_at: Optional[str] = None


class StripeCheckoutSession(WireModel):
    id: str
    stripe_session_id: Optional[str] = None
    checkout_url: Optional[str] = None
    amount: int = 0
    currency: str = "USD"
    status: Optional[str] = None


class StripePaymentIntent(WireModel):
    id: str
    stripe_intent_id: Optional[str] = None
    client_secret: Optional[str] = None
    amount: int = 0
    currency: str = "USD"
    status: Optional[str] = None


class CheckoutForm(BaseModel):
    """Checkout form, amount in major units"""

    customer_id: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0)
    currency: str = "USD"
    description: Optional[str] = None
    customer_email: Optional[str] = None
    success_url: str = Field(..., min_length=1)
    cancel_url: str = Field(..., min_length=1)


class PaymentIntentForm(BaseModel):
    customer_id: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0)
    currency: str = "USD"
    description: Optional[str] = None
