"""
Service Repositories - service desk and IT assets
"""
from typing import Any, Dict, List

from erp_console.domain import ITAsset, KnowledgeArticle, Page, Ticket
from erp_console.domain.service import TICKET_STATUSES
from erp_console.repositories.module import ModuleRepository


class ServiceDeskRepository(ModuleRepository):
    module = "service"

    async def get_tickets(self, page: int = 1, per_page: int = 20) -> Page[Ticket]:
        return await self.resource("tickets").list(page=page, per_page=per_page)

    async def create_ticket(self, data: Dict[str, Any]) -> Ticket:
        return await self.resource("tickets").create(data)

    async def update_ticket_status(self, ticket_id: str, status: str) -> Any:
        if status not in TICKET_STATUSES:
            raise ValueError(f"Unknown ticket status '{status}'")
        return await self.resource("tickets").perform(ticket_id, "status", {'status': status})

    async def get_ticket_stats(self) -> Dict[str, Any]:
        return await self.connector.get(self.path("/tickets/stats")) or {}

    async def search_articles(self, query: str) -> List[KnowledgeArticle]:
        if not query.strip():
            return []
        data = await self.connector.get(self.path("/articles/search"), params={'query': query})
        if isinstance(data, dict):
            data = data.get('items', data.get('data', []))
        return [KnowledgeArticle.model_validate(article) for article in data or []]


class AssetsRepository(ModuleRepository):
    module = "assets"

    async def get_assets(self, page: int = 1, per_page: int = 20) -> Page[ITAsset]:
        return await self.resource("it-assets").list(page=page, per_page=per_page)

    async def create_asset(self, data: Dict[str, Any]) -> ITAsset:
        return await self.resource("it-assets").create(data)

    async def update_asset_status(self, asset_id: str, status: str) -> Any:
        return await self.resource("it-assets").perform(asset_id, "status", {'status': status})

    async def get_asset_stats(self) -> Dict[str, Any]:
        return await self.connector.get(self.path("/it-assets/stats")) or {}

    async def get_licenses(self, page: int = 1, per_page: int = 20) -> Page:
        return await self.resource("licenses").list(page=page, per_page=per_page)

    async def create_license(self, data: Dict[str, Any]) -> Any:
        return await self.resource("licenses").create(data)

    async def use_license_seat(self, license_id: str) -> Any:
        return await self.resource("licenses").perform(license_id, "use")
