"""
Credit Service - credit management page

Every limit and hold change needs a reason; a blank one is rejected before
any request is made.
"""
import logging
from typing import Any, Dict

from erp_console.core.errors import FormValidationError
from erp_console.repositories.credit_repository import CreditRepository
from erp_console.services.page_loader import load_sections

logger = logging.getLogger(__name__)


def format_cents(cents: int) -> str:
    """Format integer cents as dollars, e.g. 123456 -> "$1,234.56" """
    sign = "-" if cents < 0 else ""
    return f"{sign}${abs(cents) / 100:,.2f}"


def _require_reason(reason: str, message: str) -> str:
    reason = (reason or '').strip()
    if not reason:
        raise FormValidationError(message)
    return reason


class CreditService:
    def __init__(self, repository: CreditRepository):
        self.repository = repository

    async def load_overview(self) -> Dict[str, Any]:
        return await load_sections(
            summary=self.repository.get_summary(),
            profiles=self.repository.get_profiles(page=1, limit=50),
            on_hold=self.repository.get_on_hold(),
            high_risk=self.repository.get_high_risk(),
        )

    async def load_profile_details(self, customer_id: str) -> Dict[str, Any]:
        return await load_sections(
            transactions=self.repository.get_transactions(customer_id, limit=20),
            holds=self.repository.get_holds(customer_id),
        )

    async def update_limit(self, customer_id: str, credit_limit: int, reason: str) -> Any:
        reason = _require_reason(reason, "Please provide a reason for the limit change")
        if credit_limit < 0:
            raise FormValidationError("Credit limit cannot be negative")
        logger.info(f"Updating credit limit of {customer_id} to {format_cents(credit_limit)}")
        return await self.repository.update_limit(customer_id, credit_limit, reason)

    async def place_hold(self, customer_id: str, reason: str) -> Any:
        reason = _require_reason(reason, "Please provide a reason for the hold")
        logger.info(f"Placing credit hold on {customer_id}")
        return await self.repository.place_hold(customer_id, reason)

    async def release_hold(self, customer_id: str, reason: str) -> Any:
        reason = _require_reason(reason, "Please provide a reason for releasing the hold")
        logger.info(f"Releasing credit hold on {customer_id}")
        return await self.repository.release_hold(customer_id, reason)
