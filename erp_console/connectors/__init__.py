"""
Connectors Layer - HTTP access to the ERP backend
"""
from erp_console.connectors.erp_connector import ErpConnector

__all__ = ['ErpConnector']
