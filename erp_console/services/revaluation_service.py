"""
Currency revaluation workflow: preview, create, post, reverse
"""
import calendar
from datetime import date
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from erp_console.core.errors import FormValidationError
from erp_console.domain.finance import RevaluationCreate, RevaluationLine, RevaluationPreview
from erp_console.repositories.base import describe_validation_error
from erp_console.repositories.finance_repository import FinanceRepository


def default_form(today: date = None) -> RevaluationCreate:
    """Today's date, the current calendar month as the period, USD"""
    today = today or date.today()
    last_day = calendar.monthrange(today.year, today.month)[1]
    return RevaluationCreate(
        revaluation_date=today,
        period_start=today.replace(day=1),
        period_end=today.replace(day=last_day),
        base_currency="USD",
    )


def _form(data: Union[RevaluationCreate, Dict[str, Any]]) -> RevaluationCreate:
    if isinstance(data, RevaluationCreate):
        return data
    try:
        return RevaluationCreate.model_validate(data)
    except ValidationError as e:
        raise FormValidationError(describe_validation_error(e)) from e


class RevaluationService:
    def __init__(self, finance: FinanceRepository):
        self.finance = finance

    async def preview(self, data) -> RevaluationPreview:
        form = _form(data)
        return await self.finance.preview_revaluation(
            form.revaluation_date.isoformat(), form.base_currency
        )

    async def create(self, data) -> Any:
        form = _form(data)
        if form.period_end < form.period_start:
            raise FormValidationError("Period end must not be before period start")
        return await self.finance.create_revaluation(form)

    async def post(self, revaluation_id: str) -> Any:
        return await self.finance.post_revaluation(revaluation_id)

    async def reverse(self, revaluation_id: str) -> Any:
        return await self.finance.reverse_revaluation(revaluation_id)

    async def lines(self, revaluation_id: str) -> List[RevaluationLine]:
        return await self.finance.get_revaluation_lines(revaluation_id)
