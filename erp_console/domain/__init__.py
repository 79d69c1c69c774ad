"""
Domain Layer - ERP wire shapes

Pydantic models mirroring what the ERP backend returns. The console holds no
invariants over them: creation, mutation and deletion are the server's job.

Author: TM3
Date: 2025-10-17
"""
from erp_console.domain.common import CountResponse, MessageResponse, Page, WireModel
from erp_console.domain.auth import LoginResponse, User
from erp_console.domain.finance import (
    Account, AccountCreate, CurrencyRevaluation, JournalEntry, JournalEntryCreate,
    JournalLine, JournalLineInput, RevaluationCreate, RevaluationLine, RevaluationPreview,
)
from erp_console.domain.supply_chain import (
    Bid, BillOfMaterials, Product, ProductCreate, PurchaseOrder, SourcingEvent,
    StockLevel, StockMovement, Vendor, VendorCreate, Warehouse, WarehouseCreate, WorkOrder,
)
from erp_console.domain.sales import (
    Customer, CustomerCreate, Discount, Lead, Opportunity, PriceBook, Promotion,
    Quotation, SalesOrder,
)
from erp_console.domain.people import (
    AttendanceRecord, Employee, EmployeeCreate, Project, ProjectMilestone, ProjectTask, Timesheet,
)
from erp_console.domain.service import ITAsset, KnowledgeArticle, SoftwareLicense, Ticket, TicketCreate
from erp_console.domain.governance import (
    ApprovalRequest, ApprovalWorkflow, AuditLog, ConfigEntry, ConsentRecord, DataBreach,
    DataSubject, DSARRequest, Rule, Ruleset,
)
from erp_console.domain.credit import CreditHold, CreditProfile, CreditSummary, CreditTransaction
from erp_console.domain.notifications import Notification
from erp_console.domain.commerce import (
    CheckoutForm, EcommerceOrder, EcommercePlatform, EcommercePlatformCreate, Payment,
    PaymentIntentForm, POSStore, POSStoreCreate, POSTransaction, StripeCheckoutSession,
    StripePaymentIntent,
)
from erp_console.domain.documents import Document, DocumentCreate, Folder, FolderCreate

__all__ = [
    'Page', 'WireModel', 'MessageResponse', 'CountResponse',
    'User', 'LoginResponse',
    'Account', 'AccountCreate', 'JournalEntry', 'JournalLine', 'JournalEntryCreate',
    'JournalLineInput', 'CurrencyRevaluation', 'RevaluationLine', 'RevaluationPreview',
    'RevaluationCreate',
    'Product', 'ProductCreate', 'Warehouse', 'WarehouseCreate', 'StockLevel', 'StockMovement',
    'Vendor', 'VendorCreate', 'PurchaseOrder', 'BillOfMaterials', 'WorkOrder',
    'SourcingEvent', 'Bid',
    'Customer', 'CustomerCreate', 'SalesOrder', 'Quotation', 'Lead', 'Opportunity',
    'PriceBook', 'Discount', 'Promotion',
    'Employee', 'EmployeeCreate', 'AttendanceRecord', 'Project', 'ProjectTask',
    'ProjectMilestone', 'Timesheet',
    'Ticket', 'TicketCreate', 'KnowledgeArticle', 'ITAsset', 'SoftwareLicense',
    'DataSubject', 'ConsentRecord', 'DSARRequest', 'DataBreach', 'ConfigEntry', 'Rule',
    'Ruleset', 'ApprovalWorkflow', 'ApprovalRequest', 'AuditLog',
    'CreditProfile', 'CreditSummary', 'CreditTransaction', 'CreditHold',
    'Notification',
    'POSStore', 'POSStoreCreate', 'POSTransaction', 'EcommercePlatform',
    'EcommercePlatformCreate', 'EcommerceOrder', 'Payment', 'StripeCheckoutSession',
    'StripePaymentIntent', 'CheckoutForm', 'PaymentIntentForm',
    'Folder', 'FolderCreate', 'Document', 'DocumentCreate',
]
