"""
Base class for per-module repositories
"""
from erp_console.connectors.erp_connector import ErpConnector
from erp_console.repositories.base import ResourceRepository
from erp_console.repositories.catalog import get_resource_spec


class ModuleRepository:
    """Groups the resources of one ERP module behind a single object"""

    module: str = ""

    def __init__(self, connector: ErpConnector):
        self.connector = connector

    def resource(self, name: str) -> ResourceRepository:
        return ResourceRepository(self.connector, get_resource_spec(self.module, name))

    def path(self, suffix: str) -> str:
        return f"/api/v1/{self.module}{suffix}"
