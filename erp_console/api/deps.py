"""
Request dependencies for the console routes

Each request gets its own connector seeded with the token from the session
cookie. Tests put an httpx transport on app.state.erp_transport.
"""
from fastapi import Depends, Request

from erp_console.connectors.erp_connector import ErpConnector
from erp_console.core.config import settings
from erp_console.core.token_store import MemoryTokenStore
from erp_console.repositories.erp_api import ErpApi


def get_connector(request: Request) -> ErpConnector:
    token = request.cookies.get(settings.ERP_TOKEN_COOKIE)
    return ErpConnector(
        token_store=MemoryTokenStore(token),
        transport=getattr(request.app.state, "erp_transport", None),
    )


def get_api(connector: ErpConnector = Depends(get_connector)) -> ErpApi:
    return ErpApi(connector)
