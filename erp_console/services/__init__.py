"""
Console services: page loading and the client-side checks of each page
"""
from erp_console.services.credit_service import CreditService, format_cents
from erp_console.services.dashboard_service import DashboardService
from erp_console.services.global_search import DebouncedSearch, mock_search
from erp_console.services.journal_entry_service import JournalEntryService, check_balance
from erp_console.services.notification_center import NotificationCenter, format_relative_time
from erp_console.services.page_loader import load_sections
from erp_console.services.revaluation_service import RevaluationService, default_form
from erp_console.services.tabular_service import ImportService, export_csv, import_csv, render_table

__all__ = [
    "CreditService",
    "DashboardService",
    "DebouncedSearch",
    "ImportService",
    "JournalEntryService",
    "NotificationCenter",
    "RevaluationService",
    "check_balance",
    "default_form",
    "export_csv",
    "format_cents",
    "format_relative_time",
    "import_csv",
    "load_sections",
    "mock_search",
    "render_table",
]
