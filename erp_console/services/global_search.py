"""
Global search

Matches the query against a fixed catalog of sample records. The search box
is not connected to the backend; DebouncedSearch only runs the last query
typed within the debounce window.
"""
import asyncio
import logging
from typing import Callable, Dict, List, Optional

from erp_console.core.config import settings

logger = logging.getLogger(__name__)

MAX_RESULTS = 10

MOCK_CATALOG: List[Dict[str, str]] = [
    {'type': 'Product', 'id': '1', 'name': 'Laptop Pro 15', 'description': 'Electronics', 'path': '/inventory'},
    {'type': 'Product', 'id': '2', 'name': 'Office Chair', 'description': 'Furniture', 'path': '/inventory'},
    {'type': 'Product', 'id': '3', 'name': 'Printer Paper A4', 'description': 'Supplies', 'path': '/inventory'},
    {'type': 'Customer', 'id': '1', 'name': 'Acme Corporation', 'description': 'Enterprise', 'path': '/sales'},
    {'type': 'Customer', 'id': '2', 'name': 'TechStart Inc', 'description': 'SMB', 'path': '/sales'},
    {'type': 'Vendor', 'id': '1', 'name': 'Global Supplies Ltd', 'description': 'Office supplies', 'path': '/purchasing'},
    {'type': 'Vendor', 'id': '2', 'name': 'TechParts Co', 'description': 'Components', 'path': '/purchasing'},
    {'type': 'Project', 'id': '1', 'name': 'ERP Implementation', 'description': 'Active', 'path': '/projects'},
    {'type': 'Project', 'id': '2', 'name': 'Website Redesign', 'description': 'In Progress', 'path': '/projects'},
]


def mock_search(query: str) -> List[Dict[str, str]]:
    """Case-insensitive match on name or description, at most 10 results"""
    term = (query or '').strip().lower()
    if not term:
        return []
    matches = [
        dict(item) for item in MOCK_CATALOG
        if term in item['name'].lower() or term in item['description'].lower()
    ]
    return matches[:MAX_RESULTS]


class DebouncedSearch:
    """
    Runs `search` once typing pauses for `delay_ms`

    Each submit() cancels the pending search, so only the last query within
    the window is executed.
    """

    def __init__(self, delay_ms: int = None,
                 search: Callable[[str], List[Dict[str, str]]] = mock_search):
        self.delay_ms = delay_ms if delay_ms is not None else settings.ERP_SEARCH_DEBOUNCE_MS
        self.search = search
        self.executed: List[str] = []
        self._pending: Optional[asyncio.Task] = None

    async def _delayed(self, query: str) -> List[Dict[str, str]]:
        await asyncio.sleep(self.delay_ms / 1000)
        self.executed.append(query)
        return self.search(query)

    def submit(self, query: str) -> asyncio.Task:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = asyncio.get_running_loop().create_task(self._delayed(query))
        return self._pending

    async def results(self) -> List[Dict[str, str]]:
        """Results of the latest submitted query ([] when nothing was submitted)"""
        if self._pending is None:
            return []
        return await self._pending
