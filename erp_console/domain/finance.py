"""
Finance Domain Models

Accounts, journal entries and currency revaluations as returned by
/api/v1/finance. Amounts on entries come back in major units; amounts sent
in journal lines are integer cents.

Author: TM3
Date: 2025-10-17
"""
from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from erp_console.domain.common import WireModel

ACCOUNT_TYPES = ("Asset", "Liability", "Equity", "Revenue", "Expense")


class Account(WireModel):
    id: str
    code: str
    name: str
    account_type: str
    parent_id: Optional[str] = None
    status: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class AccountCreate(BaseModel):
    code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    account_type: str = Field("Asset", description="One of Asset, Liability, Equity, Revenue, Expense")
    description: Optional[str] = None


class JournalLine(WireModel):
    id: Optional[str] = None
    account_id: str
    debit: float = 0
    credit: float = 0
    description: Optional[str] = None


class JournalEntry(WireModel):
    id: str
    entry_number: str
    date: Optional[str] = None
    description: str = ""
    reference: Optional[str] = None
    lines: List[JournalLine] = Field(default_factory=list)
    status: Optional[str] = None
    total_debit: float = 0
    total_credit: float = 0


class JournalLineInput(BaseModel):
    """One line of the journal entry form, amounts in major units"""

    account_id: str = Field(..., min_length=1)
    debit: Decimal = Field(Decimal("0"), ge=0)
    credit: Decimal = Field(Decimal("0"), ge=0)
    description: Optional[str] = None


class JournalEntryCreate(BaseModel):
    description: str = Field(..., min_length=1)
    reference: Optional[str] = None
    lines: List[JournalLineInput] = Field(..., min_length=1)


class CurrencyRevaluation(WireModel):
    id: str
    revaluation_number: str
    revaluation_date: str
    period_start: Optional[str] = None
    period_end: Optional[str] = None
    base_currency: str = "USD"
    status: str = "Draft"
    total_unrealized_gain: float = 0
    total_unrealized_loss: float = 0
    net_unrealized: float = 0
    journal_entry_id: Optional[str] = None


class RevaluationLine(WireModel):
    account_id: str
    account_code: Optional[str] = None
    account_name: Optional[str] = None
    currency: str
    original_balance: float = 0
    original_rate: float = 0
    revaluation_rate: float = 0
    base_currency_balance: float = 0
    revalued_balance: float = 0
    unrealized_gain: float = 0
    unrealized_loss: float = 0


class RevaluationPreview(WireModel):
    revaluation_date: str
    base_currency: str
    lines: List[RevaluationLine] = Field(default_factory=list)
    total_unrealized_gain: float = 0
    total_unrealized_loss: float = 0
    net_unrealized: float = 0


class RevaluationCreate(BaseModel):
    revaluation_date: date
    period_start: date
    period_end: date
    base_currency: str = Field("USD", min_length=3, max_length=3)
