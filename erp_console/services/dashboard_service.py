"""
Dashboard Service - headline counts for the home page

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import Any, Dict, List

from erp_console.repositories.erp_api import ErpApi
from erp_console.services.page_loader import load_sections

logger = logging.getLogger(__name__)

# (stat key, module, resource, card label, card link)
DASHBOARD_STATS = [
    ("products", "inventory", "products", "Products", "/inventory"),
    ("sales_orders", "sales", "orders", "Sales Orders", "/sales"),
    ("customers", "sales", "customers", "Customers", "/sales"),
    ("vendors", "purchasing", "vendors", "Vendors", "/purchasing"),
    ("accounts", "finance", "accounts", "Accounts", "/finance"),
    ("employees", "hr", "employees", "Employees", "/hr"),
]


class DashboardService:
    """Totals shown on the dashboard, each read from a one-item page"""

    def __init__(self, api: ErpApi):
        self.api = api

    async def load_stats(self) -> Dict[str, Any]:
        """
        Load every count in parallel

        Returns:
            {"stats": {key: total}, "cards": [{label, value, href}]}
        """
        pages = await load_sections(**{
            key: self.api.resource(module, name).list(page=1, per_page=1)
            for key, module, name, _, _ in DASHBOARD_STATS
        })
        stats = {key: page.total for key, page in pages.items()}

        cards: List[Dict[str, Any]] = [
            {'label': label, 'value': stats[key], 'href': href}
            for key, _, _, label, href in DASHBOARD_STATS
        ]
        logger.debug(f"Dashboard stats: {stats}")
        return {'stats': stats, 'cards': cards}
