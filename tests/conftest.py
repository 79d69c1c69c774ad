"""
Pytest fixtures and configuration for ERP Console tests

The ERP backend is replaced by FakeErpBackend, an httpx.MockTransport handler
that serves canned responses and records every request it receives.

Author: TM3
Date: 2025-10-17
"""
import json
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import httpx
import pytest
from fastapi.testclient import TestClient

from erp_console.connectors.erp_connector import ErpConnector
from erp_console.core.token_store import MemoryTokenStore
from erp_console.repositories.erp_api import ErpApi

Route = Union[Tuple[int, Any], Callable[[httpx.Request], httpx.Response]]


def request_json(request: httpx.Request) -> Any:
    """Decoded JSON body of a recorded request (None when empty)"""
    if not request.content:
        return None
    return json.loads(request.content)


def page_body(items: List[Dict[str, Any]], total: int = None, page: int = 1,
              per_page: int = 20) -> Dict[str, Any]:
    total = len(items) if total is None else total
    total_pages = (total + per_page - 1) // per_page if per_page else 0
    return {
        "items": items,
        "total": total,
        "page": page,
        "per_page": per_page,
        "total_pages": total_pages,
    }


class FakeErpBackend:
    """In-memory stand-in for the ERP REST API"""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Route] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, json: Any = None, status: int = 200,
            handler: Optional[Callable[[httpx.Request], httpx.Response]] = None) -> None:
        self.routes[(method.upper(), path)] = handler or (status, json)

    def collection(self, path: str, items: Optional[List[Dict[str, Any]]] = None,
                   id_prefix: str = "id") -> List[Dict[str, Any]]:
        """
        A paginated collection that remembers what is POSTed to it

        Returns the backing list so tests can inspect it.
        """
        store = list(items or [])

        def list_items(request: httpx.Request) -> httpx.Response:
            page = int(request.url.params.get("page", 1))
            per_page = int(request.url.params.get("per_page", 20))
            start = (page - 1) * per_page
            return httpx.Response(
                200,
                json=page_body(store[start:start + per_page], total=len(store),
                               page=page, per_page=per_page),
            )

        def create_item(request: httpx.Request) -> httpx.Response:
            item = {"id": f"{id_prefix}-{len(store) + 1}", **request_json(request)}
            store.append(item)
            return httpx.Response(201, json=item)

        self.add("GET", path, handler=list_items)
        self.add("POST", path, handler=create_item)
        return store

    def calls(self, method: str = None, path: str = None) -> List[httpx.Request]:
        return [
            r for r in self.requests
            if (method is None or r.method == method.upper())
            and (path is None or r.url.path == path)
        ]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": f"No route for {request.method} {request.url.path}"})
        if callable(route):
            return route(request)
        status, body = route
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)


@pytest.fixture
def backend():
    """Fresh fake backend per test"""
    return FakeErpBackend()


@pytest.fixture
def token_store():
    return MemoryTokenStore("test-token")


@pytest.fixture
def connector(backend, token_store):
    """ErpConnector wired to the fake backend"""
    return ErpConnector(
        base_url="http://erp.test",
        token_store=token_store,
        transport=httpx.MockTransport(backend),
    )


@pytest.fixture
def api(connector):
    return ErpApi(connector)


@pytest.fixture
def client(backend):
    """
    TestClient for the console service, talking to the fake backend

    The session cookie is preset; tests that need an anonymous client clear it.
    """
    from erp_console.main import app

    app.state.erp_transport = httpx.MockTransport(backend)
    with TestClient(app) as test_client:
        test_client.cookies.set("erp_token", "test-token")
        yield test_client
    app.state.erp_transport = None


@pytest.fixture
def sample_product_data():
    return {
        "id": "p-1",
        "sku": "LAP-15",
        "name": "Laptop Pro 15",
        "product_type": "Goods",
        "unit_of_measure": "PCS",
        "status": "Active",
    }


@pytest.fixture
def sample_notification_data():
    return {
        "id": "n-1",
        "title": "Purchase order awaiting approval",
        "message": "PO-1001 needs your approval",
        "notification_type": "ApprovalRequired",
        "entity_type": "PurchaseOrder",
        "entity_id": "po-1001",
        "read": False,
        "created_at": "2025-10-17T10:00:00Z",
    }
