"""
Credit Repository - customer credit profiles, holds and limits
"""
from typing import Any, Dict, List

from erp_console.domain import CreditHold, CreditProfile, CreditSummary, CreditTransaction
from erp_console.repositories.module import ModuleRepository


class CreditRepository(ModuleRepository):
    module = "credit"

    async def get_summary(self) -> CreditSummary:
        data = await self.connector.get(self.path("/summary"))
        return CreditSummary.model_validate(data or {})

    async def get_profiles(self, page: int = 1, limit: int = 20) -> List[CreditProfile]:
        """One page of profiles; the backend pages with page/limit and returns a plain list"""
        return await self._profile_list("/profiles", params={'page': page, 'limit': limit})

    async def _profile_list(self, suffix: str, params: Dict[str, Any] = None) -> List[CreditProfile]:
        data = await self.connector.get(self.path(suffix), params=params)
        if isinstance(data, dict):
            data = data.get('data', data.get('items', []))
        return [CreditProfile.model_validate(profile) for profile in data or []]

    async def get_on_hold(self) -> List[CreditProfile]:
        return await self._profile_list("/profiles/on-hold")

    async def get_high_risk(self) -> List[CreditProfile]:
        return await self._profile_list("/profiles/high-risk")

    async def get_transactions(self, customer_id: str, limit: int = 20) -> List[CreditTransaction]:
        return await self.resource("transactions").list(customer_id=customer_id, limit=limit)

    async def get_holds(self, customer_id: str) -> List[CreditHold]:
        return await self.resource("holds").list(customer_id=customer_id)

    async def update_limit(self, customer_id: str, credit_limit: int, reason: str) -> Any:
        return await self.connector.post(
            self.path(f"/customers/{customer_id}/limit"),
            json={'credit_limit': credit_limit, 'reason': reason},
        )

    async def place_hold(self, customer_id: str, reason: str) -> Any:
        return await self.connector.post(
            self.path(f"/customers/{customer_id}/hold"),
            json={'reason': reason},
        )

    async def release_hold(self, customer_id: str, override_reason: str) -> Any:
        return await self.connector.post(
            self.path(f"/customers/{customer_id}/release"),
            json={'override_reason': override_reason},
        )
