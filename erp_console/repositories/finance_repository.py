"""
Finance Repository - accounts, journal entries, reports, currency revaluation
"""
from typing import Any, Dict, List

from erp_console.domain import (
    Account, CurrencyRevaluation, JournalEntry, Page, RevaluationLine, RevaluationPreview,
)
from erp_console.repositories.module import ModuleRepository

REPORTS = {
    "balance-sheet": "/reports/balance-sheet",
    "profit-and-loss": "/reports/profit-and-loss",
    "trial-balance": "/reports/trial-balance",
}


class FinanceRepository(ModuleRepository):
    """Finance endpoints under /api/v1/finance"""

    module = "finance"

    @property
    def accounts(self):
        return self.resource("accounts")

    @property
    def journal_entries(self):
        return self.resource("journal-entries")

    @property
    def revaluations(self):
        return self.resource("currency-revaluations")

    # ==================== ACCOUNTS & JOURNAL ====================

    async def get_accounts(self, page: int = 1, per_page: int = 20) -> Page[Account]:
        return await self.accounts.list(page=page, per_page=per_page)

    async def create_account(self, data: Dict[str, Any]) -> Account:
        return await self.accounts.create(data)

    async def get_journal_entries(self, page: int = 1, per_page: int = 20) -> Page[JournalEntry]:
        return await self.journal_entries.list(page=page, per_page=per_page)

    async def create_journal_entry(self, payload: Dict[str, Any]) -> JournalEntry:
        """POST a journal entry payload (amounts already in cents)"""
        return await self.journal_entries.create(payload)

    async def post_journal_entry(self, entry_id: str) -> Any:
        return await self.journal_entries.perform(entry_id, "post")

    # ==================== REPORTS ====================

    async def get_report(self, report: str) -> Dict[str, Any]:
        """
        Fetch a financial report

        Args:
            report: balance-sheet, profit-and-loss or trial-balance
        """
        if report not in REPORTS:
            raise ValueError(f"Unknown report '{report}'. Use one of: {', '.join(REPORTS)}")
        return await self.connector.get(self.path(REPORTS[report]))

    async def get_balance_sheet(self) -> Dict[str, Any]:
        return await self.get_report("balance-sheet")

    async def get_profit_and_loss(self) -> Dict[str, Any]:
        return await self.get_report("profit-and-loss")

    async def get_trial_balance(self) -> Dict[str, Any]:
        return await self.get_report("trial-balance")

    # ==================== CURRENCY REVALUATION ====================

    async def list_revaluations(self) -> List[CurrencyRevaluation]:
        return await self.revaluations.list()

    async def preview_revaluation(self, revaluation_date: str, base_currency: str) -> RevaluationPreview:
        data = await self.connector.post(
            self.path("/currency-revaluations/preview"),
            json={'revaluation_date': revaluation_date, 'base_currency': base_currency},
        )
        return RevaluationPreview.model_validate(data)

    async def create_revaluation(self, data: Dict[str, Any]) -> Any:
        return await self.revaluations.create(data)

    async def post_revaluation(self, revaluation_id: str) -> Any:
        return await self.revaluations.perform(revaluation_id, "post")

    async def reverse_revaluation(self, revaluation_id: str) -> Any:
        return await self.revaluations.perform(revaluation_id, "reverse")

    async def get_revaluation_lines(self, revaluation_id: str) -> List[RevaluationLine]:
        data = await self.connector.get(self.path(f"/currency-revaluations/{revaluation_id}/lines"))
        if isinstance(data, dict):
            data = data.get('data', data.get('items', []))
        return [RevaluationLine.model_validate(line) for line in data or []]
