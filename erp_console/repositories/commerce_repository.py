"""
Commerce Repositories - point of sale, e-commerce channels and payments
"""
from typing import Any, Dict, List, Optional

from erp_console.core.errors import ErpApiError
from erp_console.domain import (
    EcommerceOrder, EcommercePlatform, Page, Payment, POSStore, POSTransaction,
    StripeCheckoutSession, StripePaymentIntent,
)
from erp_console.repositories.module import ModuleRepository


class PosRepository(ModuleRepository):
    module = "pos"

    async def get_stores(self, page: int = 1, per_page: int = 20) -> Page[POSStore]:
        return await self.resource("stores").list(page=page, per_page=per_page)

    async def create_store(self, data: Dict[str, Any]) -> POSStore:
        return await self.resource("stores").create(data)

    async def get_transactions(self, page: int = 1, per_page: int = 20,
                               store_id: Optional[str] = None) -> Page[POSTransaction]:
        filters = {'store_id': store_id} if store_id else {}
        return await self.resource("transactions").list(page=page, per_page=per_page, **filters)

    async def void_transaction(self, transaction_id: str) -> Any:
        return await self.resource("transactions").perform(transaction_id, "void")


class EcommerceRepository(ModuleRepository):
    module = "ecommerce"

    async def get_platforms(self, page: int = 1, per_page: int = 20) -> Page[EcommercePlatform]:
        return await self.resource("platforms").list(page=page, per_page=per_page)

    async def create_platform(self, data: Dict[str, Any]) -> EcommercePlatform:
        return await self.resource("platforms").create(data)

    async def get_orders(self, page: int = 1, per_page: int = 20,
                         platform_id: Optional[str] = None) -> Page[EcommerceOrder]:
        filters = {'platform_id': platform_id} if platform_id else {}
        return await self.resource("orders").list(page=page, per_page=per_page, **filters)

    async def link_sales_order(self, order_id: str, sales_order_id: str) -> Any:
        return await self.resource("orders").perform(
            order_id, "link", {'sales_order_id': sales_order_id}
        )


class PaymentsRepository(ModuleRepository):
    module = "payments"

    async def get_customer_payments(self, customer_id: str) -> List[Payment]:
        return await self.resource("customer-payments").list(customer_id=customer_id)


class StripeRepository(ModuleRepository):
    """
    Stripe checkout sessions and payment intents

    These endpoints report failures as a 200 response carrying {"error": ...};
    such a body is raised as ErpApiError.
    """

    module = "stripe"

    @staticmethod
    def _checked(data: Any) -> Any:
        if isinstance(data, dict) and data.get('error'):
            raise ErpApiError(str(data['error']), payload=data)
        return data

    async def create_checkout_session(self, payload: Dict[str, Any]) -> StripeCheckoutSession:
        data = await self.connector.post(self.path("/checkout"), json=payload)
        return StripeCheckoutSession.model_validate(self._checked(data))

    async def create_payment_intent(self, payload: Dict[str, Any]) -> StripePaymentIntent:
        data = await self.connector.post(self.path("/intents"), json=payload)
        return StripePaymentIntent.model_validate(self._checked(data))

    async def get_payment_intent(self, intent_id: str) -> StripePaymentIntent:
        data = await self.connector.get(self.path(f"/intents/{intent_id}"))
        return StripePaymentIntent.model_validate(self._checked(data))

    async def cancel_payment_intent(self, intent_id: str, stripe_intent_id: str) -> Any:
        data = await self.connector.post(
            self.path(f"/intents/{intent_id}/cancel"),
            json={'stripe_intent_id': stripe_intent_id},
        )
        return self._checked(data)

    async def get_publishable_key(self) -> Optional[str]:
        data = self._checked(await self.connector.get(self.path("/config")))
        return (data or {}).get('publishable_key')
