"""
Journal entry submission

The only client-side business check in the console: an entry whose debits
and credits differ by more than one cent is never sent to the backend.
Amounts are entered in major units and submitted as integer cents.
"""
import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, Iterable, Tuple, Union

from pydantic import ValidationError

from erp_console.core.errors import FormValidationError
from erp_console.domain.finance import JournalEntryCreate, JournalLineInput
from erp_console.repositories.base import describe_validation_error
from erp_console.repositories.finance_repository import FinanceRepository

logger = logging.getLogger(__name__)

BALANCE_TOLERANCE = Decimal("0.01")
UNBALANCED_MESSAGE = "Journal entry must balance (debits must equal credits)"


def _amount(value: Any) -> Decimal:
    if value in (None, ''):
        return Decimal("0")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation as e:
        raise FormValidationError(f"Invalid amount '{value}'") from e
    if not amount.is_finite():
        raise FormValidationError(f"Invalid amount '{value}'")
    return amount


def totals(lines: Iterable[Union[JournalLineInput, Dict[str, Any]]]) -> Tuple[Decimal, Decimal]:
    """Sum of debits and sum of credits"""
    total_debit = Decimal("0")
    total_credit = Decimal("0")
    for line in lines:
        if isinstance(line, JournalLineInput):
            debit, credit = line.debit, line.credit
        else:
            debit, credit = _amount(line.get('debit')), _amount(line.get('credit'))
        total_debit += debit
        total_credit += credit
    return total_debit, total_credit


def check_balance(lines) -> None:
    """Raise FormValidationError when |sum(debit) - sum(credit)| > 0.01"""
    lines = list(lines)
    if not lines:
        raise FormValidationError("Journal entry needs at least one line")
    total_debit, total_credit = totals(lines)
    if abs(total_debit - total_credit) > BALANCE_TOLERANCE:
        raise FormValidationError(UNBALANCED_MESSAGE)


def to_cents(amount: Decimal) -> int:
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def parse_entry(data: Union[JournalEntryCreate, Dict[str, Any]]) -> JournalEntryCreate:
    if isinstance(data, JournalEntryCreate):
        return data
    try:
        return JournalEntryCreate.model_validate(data)
    except ValidationError as e:
        raise FormValidationError(describe_validation_error(e)) from e


def to_payload(entry: JournalEntryCreate) -> Dict[str, Any]:
    """Request body for POST /finance/journal-entries (amounts in cents)"""
    payload: Dict[str, Any] = {
        'description': entry.description,
        'reference': entry.reference,
        'lines': [
            {
                'account_id': line.account_id,
                'debit': to_cents(line.debit),
                'credit': to_cents(line.credit),
                **({'description': line.description} if line.description else {}),
            }
            for line in entry.lines
        ],
    }
    return payload


class JournalEntryService:
    """Validates and submits journal entries"""

    def __init__(self, finance: FinanceRepository):
        self.finance = finance

    async def submit(self, data: Union[JournalEntryCreate, Dict[str, Any]]) -> Any:
        """
        Create a journal entry

        Raises:
            FormValidationError: form incomplete or unbalanced; nothing is sent
        """
        entry = parse_entry(data)
        check_balance(entry.lines)
        total_debit, _ = totals(entry.lines)
        logger.info(f"Submitting journal entry '{entry.description}' ({len(entry.lines)} lines, {total_debit})")
        return await self.finance.create_journal_entry(to_payload(entry))

    async def post(self, entry_id: str) -> Any:
        return await self.finance.post_journal_entry(entry_id)
