"""
Sales Domain Models

Customers, orders, quotations, CRM pipeline and pricing.
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from erp_console.domain.common import WireModel
from erp_console.domain.supply_chain import OrderLine


class Customer(WireModel):
    id: str
    code: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[str] = None


class CustomerCreate(BaseModel):
    code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    credit_limit: Optional[int] = Field(None, ge=0, description="Cents")
    payment_terms: Optional[int] = Field(None, ge=0)


class SalesOrder(WireModel):
    id: str
    order_number: str
    customer_id: str
    status: str
    total: float = 0
    lines: List[OrderLine] = Field(default_factory=list)


class Quotation(WireModel):
    id: str
    quote_number: Optional[str] = None
    customer_id: str
    status: str
    total: float = 0
    valid_until: Optional[str] = None
    lines: List[OrderLine] = Field(default_factory=list)


# ==================== CRM ====================

OPPORTUNITY_STAGES = (
    "Prospecting", "Qualification", "Proposal", "Negotiation", "ClosedWon", "ClosedLost",
)


class Lead(WireModel):
    id: str
    lead_number: Optional[str] = None
    company_name: Optional[str] = None
    contact_name: Optional[str] = None
    email: Optional[str] = None
    source: Optional[str] = None
    status: Optional[str] = None
    estimated_value: Optional[float] = None


class Opportunity(WireModel):
    id: str
    opportunity_number: Optional[str] = None
    name: str
    customer_id: Optional[str] = None
    stage: str = "Prospecting"
    amount: float = 0
    probability: Optional[int] = None
    expected_close_date: Optional[str] = None


# ==================== PRICING ====================

class PriceBook(WireModel):
    id: str
    name: str
    currency: Optional[str] = None
    is_default: bool = False
    status: Optional[str] = None


class Discount(WireModel):
    id: str
    code: Optional[str] = None
    name: str
    discount_type: Optional[str] = None
    value: float = 0
    status: Optional[str] = None


class Promotion(WireModel):
    id: str
    code: Optional[str] = None
    name: str
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: Optional[str] = None
