"""
Sales Repositories - customers and orders, CRM, pricing
"""
from typing import Any, Dict

from erp_console.domain import Customer, Page, Quotation, SalesOrder
from erp_console.domain.sales import OPPORTUNITY_STAGES
from erp_console.repositories.module import ModuleRepository


class SalesRepository(ModuleRepository):
    module = "sales"

    async def get_customers(self, page: int = 1, per_page: int = 20) -> Page[Customer]:
        return await self.resource("customers").list(page=page, per_page=per_page)

    async def create_customer(self, data: Dict[str, Any]) -> Customer:
        return await self.resource("customers").create(data)

    async def get_orders(self, page: int = 1, per_page: int = 20) -> Page[SalesOrder]:
        return await self.resource("orders").list(page=page, per_page=per_page)

    async def create_order(self, data: Dict[str, Any]) -> SalesOrder:
        return await self.resource("orders").create(data)

    async def confirm_order(self, order_id: str) -> Any:
        return await self.resource("orders").perform(order_id, "confirm")

    async def get_quotations(self, page: int = 1, per_page: int = 20) -> Page[Quotation]:
        return await self.resource("quotations").list(page=page, per_page=per_page)

    async def create_quotation(self, data: Dict[str, Any]) -> Quotation:
        return await self.resource("quotations").create(data)

    async def transition_quotation(self, quotation_id: str, action: str) -> Any:
        """send, accept, reject or convert (to a sales order)"""
        return await self.resource("quotations").perform(quotation_id, action)


class CrmRepository(ModuleRepository):
    module = "crm"

    async def get_leads(self, page: int = 1, per_page: int = 20) -> Page:
        return await self.resource("leads").list(page=page, per_page=per_page)

    async def create_lead(self, data: Dict[str, Any]) -> Any:
        return await self.resource("leads").create(data)

    async def get_opportunities(self, page: int = 1, per_page: int = 20) -> Page:
        return await self.resource("opportunities").list(page=page, per_page=per_page)

    async def create_opportunity(self, data: Dict[str, Any]) -> Any:
        return await self.resource("opportunities").create(data)

    async def update_opportunity_stage(self, opportunity_id: str, stage: str) -> Any:
        if stage not in OPPORTUNITY_STAGES:
            raise ValueError(f"Unknown stage '{stage}'")
        return await self.resource("opportunities").perform(opportunity_id, "stage", {'stage': stage})


class PricingRepository(ModuleRepository):
    module = "pricing"

    async def list_price_books(self, page: int = 1, per_page: int = 20) -> Page:
        return await self.resource("price-books").list(page=page, per_page=per_page)

    async def create_price_book(self, data: Dict[str, Any]) -> Any:
        return await self.resource("price-books").create(data)

    async def list_discounts(self, page: int = 1, per_page: int = 20) -> Page:
        return await self.resource("discounts").list(page=page, per_page=per_page)

    async def create_discount(self, data: Dict[str, Any]) -> Any:
        return await self.resource("discounts").create(data)

    async def list_promotions(self, page: int = 1, per_page: int = 20) -> Page:
        return await self.resource("promotions").list(page=page, per_page=per_page)

    async def create_promotion(self, data: Dict[str, Any]) -> Any:
        return await self.resource("promotions").create(data)
