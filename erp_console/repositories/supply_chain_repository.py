"""
Supply Chain Repositories - inventory, purchasing, manufacturing, sourcing
"""
from typing import Any, Dict, List

from erp_console.domain import (
    Bid, Page, Product, PurchaseOrder, SourcingEvent, StockLevel, Vendor, Warehouse,
)
from erp_console.repositories.module import ModuleRepository


class InventoryRepository(ModuleRepository):
    module = "inventory"

    @property
    def products(self):
        return self.resource("products")

    @property
    def warehouses(self):
        return self.resource("warehouses")

    async def get_products(self, page: int = 1, per_page: int = 20) -> Page[Product]:
        return await self.products.list(page=page, per_page=per_page)

    async def create_product(self, data: Dict[str, Any]) -> Product:
        return await self.products.create(data)

    async def update_product(self, product_id: str, data: Dict[str, Any]) -> Product:
        return await self.products.update(product_id, data)

    async def delete_product(self, product_id: str) -> Any:
        return await self.products.delete(product_id)

    async def get_warehouses(self) -> List[Warehouse]:
        return await self.warehouses.list()

    async def create_warehouse(self, data: Dict[str, Any]) -> Warehouse:
        return await self.warehouses.create(data)

    async def get_stock(self, product_id: str) -> List[StockLevel]:
        data = await self.connector.get(self.path(f"/stock/{product_id}"))
        if isinstance(data, dict):
            data = data.get('data', data.get('items', [data]))
        return [StockLevel.model_validate(level) for level in data or []]

    async def create_stock_movement(self, data: Dict[str, Any]) -> Any:
        return await self.resource("stock-movements").create(data)


class PurchasingRepository(ModuleRepository):
    module = "purchasing"

    async def get_vendors(self, page: int = 1, per_page: int = 20) -> Page[Vendor]:
        return await self.resource("vendors").list(page=page, per_page=per_page)

    async def create_vendor(self, data: Dict[str, Any]) -> Vendor:
        return await self.resource("vendors").create(data)

    async def get_orders(self, page: int = 1, per_page: int = 20) -> Page[PurchaseOrder]:
        return await self.resource("orders").list(page=page, per_page=per_page)

    async def create_order(self, data: Dict[str, Any]) -> PurchaseOrder:
        return await self.resource("orders").create(data)

    async def approve_order(self, order_id: str) -> Any:
        return await self.resource("orders").perform(order_id, "approve")


class ManufacturingRepository(ModuleRepository):
    module = "manufacturing"

    async def get_boms(self, page: int = 1, per_page: int = 20) -> Page:
        return await self.resource("boms").list(page=page, per_page=per_page)

    async def get_work_orders(self, page: int = 1, per_page: int = 20) -> Page:
        return await self.resource("work-orders").list(page=page, per_page=per_page)

    async def start_work_order(self, work_order_id: str) -> Any:
        return await self.resource("work-orders").perform(work_order_id, "start")

    async def complete_work_order(self, work_order_id: str) -> Any:
        return await self.resource("work-orders").perform(work_order_id, "complete")


class SourcingRepository(ModuleRepository):
    module = "sourcing"

    async def list_events(self, page: int = 1, per_page: int = 20) -> Page[SourcingEvent]:
        return await self.resource("events").list(page=page, per_page=per_page)

    async def create_event(self, data: Dict[str, Any]) -> SourcingEvent:
        return await self.resource("events").create(data)

    async def publish_event(self, event_id: str) -> Any:
        return await self.resource("events").perform(event_id, "publish")

    async def list_bids(self, event_id: str) -> List[Bid]:
        return await self.resource("bids").list(event_id=event_id)

    async def accept_bid(self, bid_id: str) -> Any:
        return await self.resource("bids").perform(bid_id, "accept")
