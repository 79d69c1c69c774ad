"""
Repository Layer - typed access to the ERP REST API

Repositories call the connector and return domain models. The generic
ResourceRepository covers every paginated resource; module repositories add
the endpoints that are not plain CRUD (reports, stats, holds, ...).

Author: TM3
Date: 2025-10-17
"""
from erp_console.repositories.base import ResourceRepository, ResourceSpec
from erp_console.repositories.catalog import RESOURCES, get_resource_spec, list_modules
from erp_console.repositories.erp_api import ErpApi

__all__ = [
    'ErpApi',
    'ResourceRepository',
    'ResourceSpec',
    'RESOURCES',
    'get_resource_spec',
    'list_modules',
]
