"""
Unit tests for the global search widget and dashboard counts
"""
import asyncio

from conftest import page_body
from erp_console.services.dashboard_service import DashboardService
from erp_console.services.global_search import MOCK_CATALOG, DebouncedSearch, mock_search


class TestMockSearch:
    def test_blank_query_returns_nothing(self):
        assert mock_search("") == []
        assert mock_search("   ") == []

    def test_matches_name_case_insensitively(self):
        results = mock_search("LAPTOP")
        assert [r["name"] for r in results] == ["Laptop Pro 15"]
        assert results[0]["type"] == "Product"
        assert results[0]["path"] == "/inventory"

    def test_matches_description(self):
        results = mock_search("enterprise")
        assert [r["name"] for r in results] == ["Acme Corporation"]
        assert results[0]["path"] == "/sales"

    def test_results_are_capped(self):
        assert len(MOCK_CATALOG) == 9
        # "e" appears in nearly every record
        assert len(mock_search("e")) <= 10

    def test_results_do_not_alias_catalog(self):
        mock_search("chair")[0]["name"] = "changed"
        assert mock_search("chair")[0]["name"] == "Office Chair"


class TestDebouncedSearch:
    def test_only_last_query_in_window_runs(self):
        async def run():
            search = DebouncedSearch(delay_ms=20)
            search.submit("lap")
            search.submit("lapt")
            search.submit("tech")
            return search, await search.results()

        search, results = asyncio.run(run())

        assert search.executed == ["tech"]
        assert {r["name"] for r in results} == {"TechStart Inc", "TechParts Co"}

    def test_queries_after_the_window_both_run(self):
        async def run():
            search = DebouncedSearch(delay_ms=5)
            search.submit("chair")
            first = await search.results()
            search.submit("paper")
            second = await search.results()
            return search, first, second

        search, first, second = asyncio.run(run())

        assert search.executed == ["chair", "paper"]
        assert first[0]["name"] == "Office Chair"
        assert second[0]["name"] == "Printer Paper A4"

    def test_default_delay(self):
        assert DebouncedSearch().delay_ms == 200

    def test_results_without_submit(self):
        assert asyncio.run(DebouncedSearch().results()) == []


class TestDashboardService:
    COUNTS = {
        "/api/v1/finance/accounts": 12,
        "/api/v1/inventory/products": 340,
        "/api/v1/sales/customers": 58,
        "/api/v1/sales/orders": 977,
        "/api/v1/purchasing/vendors": 21,
        "/api/v1/hr/employees": 44,
    }

    def test_load_stats_reads_totals(self, backend, api):
        for path, total in self.COUNTS.items():
            backend.add("GET", path, json=page_body([], total=total, per_page=1))

        data = asyncio.run(DashboardService(api).load_stats())

        assert data["stats"] == {
            "products": 340,
            "sales_orders": 977,
            "customers": 58,
            "vendors": 21,
            "accounts": 12,
            "employees": 44,
        }
        assert len(backend.requests) == 6
        assert all(r.url.params["per_page"] == "1" for r in backend.requests)

    def test_cards_link_to_module_pages(self, backend, api):
        for path, total in self.COUNTS.items():
            backend.add("GET", path, json=page_body([], total=total, per_page=1))

        cards = asyncio.run(DashboardService(api).load_stats())["cards"]

        assert {c["label"]: c["href"] for c in cards} == {
            "Products": "/inventory",
            "Sales Orders": "/sales",
            "Customers": "/sales",
            "Vendors": "/purchasing",
            "Accounts": "/finance",
            "Employees": "/hr",
        }
