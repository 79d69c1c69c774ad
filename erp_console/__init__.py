"""
ERP Console - client library, console service and CLI for the ERP REST API

Author: TM3
Date: 2025-10-17
"""
__version__ = "1.0.0"
