"""
Credit Management Domain Models

All amounts are integer cents.
"""
from typing import Dict, Optional

from erp_console.domain.common import WireModel

RISK_LEVELS = ("Low", "Medium", "High", "Critical")


class CreditProfile(WireModel):
    id: Optional[str] = None
    customer_id: str
    customer_name: Optional[str] = None
    credit_limit: int = 0
    credit_used: int = 0
    available_credit: int = 0
    outstanding_invoices: int = 0
    pending_orders: int = 0
    overdue_amount: int = 0
    overdue_days_avg: int = 0
    credit_score: Optional[int] = None
    risk_level: str = "Low"
    is_on_hold: bool = False
    hold_reason: Optional[str] = None

    @property
    def utilization(self) -> float:
        """Share of the limit in use (0.0 when there is no limit)"""
        if self.credit_limit <= 0:
            return 0.0
        return self.credit_used / self.credit_limit


class CreditSummary(WireModel):
    total_customers: int = 0
    total_credit_limit: int = 0
    total_credit_used: int = 0
    total_available: int = 0
    customers_on_hold: int = 0
    high_risk_customers: int = 0
    by_risk_level: Dict[str, int] = {}


class CreditTransaction(WireModel):
    id: str
    customer_id: str
    transaction_type: str
    amount: int = 0
    reference_number: Optional[str] = None
    balance_after: Optional[int] = None
    created_at: Optional[str] = None


class CreditHold(WireModel):
    id: str
    customer_id: str
    hold_type: Optional[str] = None
    reason: Optional[str] = None
    status: str = "Active"
    placed_at: Optional[str] = None
    released_at: Optional[str] = None
    override_reason: Optional[str] = None
