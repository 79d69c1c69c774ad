"""
Unit tests for the generic ResourceRepository and the endpoint catalog

Author: TM3
Date: 2025-10-17
"""
import asyncio

import pytest

from conftest import page_body, request_json
from erp_console.core.errors import FormValidationError, UnknownResourceError
from erp_console.domain import Page, Product, ProjectTask, Warehouse
from erp_console.repositories.catalog import RESOURCES, get_resource_spec, list_modules

PRODUCTS = "/api/v1/inventory/products"


async def _collect(iterator):
    return [item async for item in iterator]


class TestResourceList:
    """Test list() against paginated and plain endpoints"""

    def test_list_returns_typed_page(self, backend, api, sample_product_data):
        # Arrange
        backend.add("GET", PRODUCTS, json=page_body([sample_product_data], total=41, per_page=20))

        # Act
        page = asyncio.run(api.inventory.get_products(page=1, per_page=20))

        # Assert
        assert isinstance(page, Page)
        assert page.total == 41
        assert page.total_pages == 3
        assert page.has_next is True
        assert isinstance(page.items[0], Product)
        assert page.items[0].sku == "LAP-15"

        params = backend.requests[0].url.params
        assert params["page"] == "1"
        assert params["per_page"] == "20"

    def test_list_uses_default_page_size(self, backend, api):
        backend.add("GET", PRODUCTS, json=page_body([]))

        asyncio.run(api.resource("inventory", "products").list())

        assert backend.requests[0].url.params["per_page"] == "20"

    def test_non_paginated_list_accepts_data_envelope(self, backend, api):
        backend.add("GET", "/api/v1/inventory/warehouses", json={"data": [
            {"id": "w-1", "code": "MAIN", "name": "Main warehouse"},
        ]})

        warehouses = asyncio.run(api.inventory.get_warehouses())

        assert len(warehouses) == 1
        assert isinstance(warehouses[0], Warehouse)
        assert "page" not in backend.requests[0].url.params

    def test_unknown_fields_are_kept(self, backend, api, sample_product_data):
        backend.add("GET", PRODUCTS, json=page_body([{**sample_product_data, "barcode": "123"}]))

        page = asyncio.run(api.inventory.get_products())

        assert page.items[0].model_dump()["barcode"] == "123"

    def test_iter_all_walks_every_page(self, backend, api):
        backend.collection(PRODUCTS, [
            {"id": f"p-{n}", "sku": f"SKU-{n}", "name": f"Product {n}"} for n in range(5)
        ])

        products = asyncio.run(_collect(api.resource("inventory", "products").iter_all(per_page=2)))

        assert [p.sku for p in products] == [f"SKU-{n}" for n in range(5)]
        assert len(backend.calls("GET", PRODUCTS)) == 3


class TestResourceMutations:
    """Test create/update/delete/perform"""

    def test_create_then_list_shows_entity(self, backend, api):
        """Creating an entity then reloading the list shows it"""
        backend.collection(PRODUCTS)

        created = asyncio.run(api.inventory.create_product({"sku": "CHAIR-1", "name": "Office Chair"}))
        page = asyncio.run(api.inventory.get_products())

        assert isinstance(created, Product)
        assert [p.sku for p in page.items] == ["CHAIR-1"]
        assert page.total == 1

    def test_create_applies_form_defaults(self, backend, api):
        backend.collection(PRODUCTS)

        asyncio.run(api.inventory.create_product({"sku": "PAPER-A4", "name": "Printer Paper A4"}))

        body = request_json(backend.calls("POST", PRODUCTS)[0])
        assert body["unit_of_measure"] == "PCS"
        assert body["product_type"] == "Goods"
        assert "description" not in body

    def test_create_with_missing_required_field_sends_nothing(self, backend, api):
        backend.collection(PRODUCTS)

        with pytest.raises(FormValidationError) as exc_info:
            asyncio.run(api.inventory.create_product({"name": "No SKU"}))

        assert "sku" in str(exc_info.value)
        assert backend.requests == []

    def test_update_and_delete_use_item_path(self, backend, api, sample_product_data):
        backend.add("PUT", f"{PRODUCTS}/p-1", json={**sample_product_data, "name": "Laptop Pro 16"})
        backend.add("DELETE", f"{PRODUCTS}/p-1", status=204)

        updated = asyncio.run(api.inventory.update_product("p-1", {"name": "Laptop Pro 16"}))
        asyncio.run(api.inventory.delete_product("p-1"))

        assert updated.name == "Laptop Pro 16"
        assert [r.method for r in backend.requests] == ["PUT", "DELETE"]

    def test_perform_posts_to_action_path(self, backend, api):
        backend.add("POST", "/api/v1/finance/journal-entries/je-1/post", json={"message": "Posted"})

        result = asyncio.run(api.finance.post_journal_entry("je-1"))

        assert result == {"message": "Posted"}
        assert backend.requests[0].method == "POST"

    def test_unsupported_action_is_rejected(self, api, backend):
        with pytest.raises(UnknownResourceError):
            asyncio.run(api.resource("inventory", "products").perform("p-1", "explode"))
        assert backend.requests == []

    def test_unsupported_operation_is_rejected(self, api):
        with pytest.raises(UnknownResourceError):
            asyncio.run(api.resource("approval-workflow", "requests").create({"x": 1}))


class TestNestedResources:
    """Resources whose collection path holds a parent id"""

    def test_list_fills_parent_id(self, backend, api):
        backend.add("GET", "/api/v1/projects/prj-1/tasks", json=[
            {"id": "t-1", "project_id": "prj-1", "name": "Kick-off"},
        ])

        tasks = asyncio.run(api.projects.get_tasks("prj-1"))

        assert isinstance(tasks[0], ProjectTask)
        assert tasks[0].name == "Kick-off"

    def test_missing_parent_id_is_rejected(self, api, backend):
        with pytest.raises(UnknownResourceError) as exc_info:
            asyncio.run(api.resource("projects", "tasks").list())
        assert "project_id" in str(exc_info.value)
        assert backend.requests == []

    def test_item_actions_use_item_path(self, backend, api):
        backend.add("POST", "/api/v1/projects/tasks/t-1/complete", json={"message": "ok"})

        asyncio.run(api.projects.complete_task("t-1"))

        assert backend.requests[0].url.path == "/api/v1/projects/tasks/t-1/complete"

    def test_create_with_parent_id(self, backend, api):
        backend.add("POST", "/api/v1/sourcing/events/ev-1/bids",
                    json={"id": "b-1", "event_id": "ev-1", "vendor_id": "v-1"})

        asyncio.run(api.resource("sourcing", "bids").create({"vendor_id": "v-1"}, event_id="ev-1"))

        assert request_json(backend.requests[0]) == {"vendor_id": "v-1"}


class TestCatalog:
    def test_every_resource_has_api_path(self):
        for (module, name), spec in RESOURCES.items():
            assert spec.path.startswith("/api/v1/"), f"{module}/{name}"
            assert spec.module == module

    def test_unknown_resource(self):
        with pytest.raises(UnknownResourceError):
            get_resource_spec("finance", "unicorns")

    def test_list_modules(self):
        modules = list_modules()
        assert "accounts" in modules["finance"]
        assert "tickets" in modules["service"]
        assert get_resource_spec("projects", "tasks").path_fields == ["project_id"]

    def test_commerce_and_document_modules(self):
        modules = list_modules()
        assert modules["pos"] == ["stores", "transactions"]
        assert modules["ecommerce"] == ["platforms", "orders"]
        assert modules["documents"] == ["folders", "documents"]
        assert get_resource_spec("payments", "customer-payments").path_fields == ["customer_id"]
