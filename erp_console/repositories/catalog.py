"""
ERP REST endpoint catalog

Every list/create/update/delete/transition endpoint the console uses, keyed
by (module, resource). Module repositories and the generic console routes
both read from here.
"""
from typing import Dict, List, Tuple

from erp_console.core.errors import UnknownResourceError
from erp_console.domain import (
    Account, AccountCreate, ApprovalRequest, ApprovalWorkflow, AuditLog, Bid, BillOfMaterials,
    ConfigEntry, ConsentRecord, CreditHold, CreditProfile, CreditTransaction, CurrencyRevaluation,
    Customer, CustomerCreate, DataBreach, DataSubject, Discount, Document, DocumentCreate,
    DSARRequest, EcommerceOrder, EcommercePlatform, EcommercePlatformCreate, Employee,
    EmployeeCreate, Folder, FolderCreate, ITAsset, JournalEntry, Lead, Notification, Opportunity,
    Payment, POSStore, POSStoreCreate, POSTransaction, PriceBook, Product, ProductCreate, Project,
    ProjectMilestone, ProjectTask, Promotion, PurchaseOrder, Quotation, Rule, Ruleset, SalesOrder,
    SoftwareLicense, SourcingEvent, StockMovement, Ticket, TicketCreate, Timesheet, Vendor,
    VendorCreate, Warehouse, WarehouseCreate, WorkOrder,
)
from erp_console.repositories.base import ResourceSpec

API = "/api/v1"

_SPECS: List[ResourceSpec] = [
    # Finance
    ResourceSpec("finance", "accounts", f"{API}/finance/accounts", Account,
                 label="Account", can_get=True, create_model=AccountCreate),
    ResourceSpec("finance", "journal-entries", f"{API}/finance/journal-entries", JournalEntry,
                 label="Journal Entry", can_get=True, actions=("post",)),
    ResourceSpec("finance", "currency-revaluations", f"{API}/finance/currency-revaluations",
                 CurrencyRevaluation, label="Currency Revaluation", paginated=False,
                 actions=("post", "reverse")),

    # Inventory
    ResourceSpec("inventory", "products", f"{API}/inventory/products", Product,
                 label="Product", can_get=True, can_update=True, can_delete=True,
                 create_model=ProductCreate),
    ResourceSpec("inventory", "warehouses", f"{API}/inventory/warehouses", Warehouse,
                 label="Warehouse", paginated=False, create_model=WarehouseCreate),
    ResourceSpec("inventory", "stock-movements", f"{API}/inventory/stock-movements", StockMovement,
                 label="Stock Movement", can_list=False),

    # Sales
    ResourceSpec("sales", "customers", f"{API}/sales/customers", Customer,
                 label="Customer", can_get=True, create_model=CustomerCreate),
    ResourceSpec("sales", "orders", f"{API}/sales/orders", SalesOrder,
                 label="Sales Order", can_get=True, actions=("confirm",)),
    ResourceSpec("sales", "quotations", f"{API}/sales/quotations", Quotation,
                 label="Quotation", can_get=True,
                 actions=("send", "accept", "reject", "convert")),

    # Purchasing
    ResourceSpec("purchasing", "vendors", f"{API}/purchasing/vendors", Vendor,
                 label="Vendor", can_get=True, create_model=VendorCreate),
    ResourceSpec("purchasing", "orders", f"{API}/purchasing/orders", PurchaseOrder,
                 label="Purchase Order", can_get=True, actions=("approve",)),

    # Manufacturing
    ResourceSpec("manufacturing", "boms", f"{API}/manufacturing/boms", BillOfMaterials,
                 label="Bill of Materials"),
    ResourceSpec("manufacturing", "work-orders", f"{API}/manufacturing/work-orders", WorkOrder,
                 label="Work Order", actions=("start", "complete")),

    # HR
    ResourceSpec("hr", "employees", f"{API}/hr/employees", Employee,
                 label="Employee", can_get=True, create_model=EmployeeCreate),

    # Service desk
    ResourceSpec("service", "tickets", f"{API}/service/tickets", Ticket,
                 label="Ticket", can_get=True, actions=("status", "assign"),
                 create_model=TicketCreate),

    # IT assets
    ResourceSpec("assets", "it-assets", f"{API}/assets/it-assets", ITAsset,
                 label="IT Asset", can_get=True, actions=("status",)),
    ResourceSpec("assets", "licenses", f"{API}/assets/licenses", SoftwareLicense,
                 label="Software License", actions=("use",)),

    # Compliance
    ResourceSpec("compliance", "data-subjects", f"{API}/compliance/data-subjects", DataSubject,
                 label="Data Subject"),
    ResourceSpec("compliance", "consents", f"{API}/compliance/consents", ConsentRecord,
                 label="Consent", actions=("withdraw",)),
    ResourceSpec("compliance", "dsars", f"{API}/compliance/dsars", DSARRequest,
                 label="DSAR", actions=("complete",)),
    ResourceSpec("compliance", "breaches", f"{API}/compliance/breaches", DataBreach,
                 label="Data Breach"),

    # Projects
    ResourceSpec("projects", "projects", f"{API}/projects", Project,
                 label="Project", can_get=True, actions=("status",)),
    ResourceSpec("projects", "tasks", f"{API}/projects/{{project_id}}/tasks", ProjectTask,
                 label="Task", paginated=False, actions=("complete",),
                 item_path=f"{API}/projects/tasks/{{id}}"),
    ResourceSpec("projects", "milestones", f"{API}/projects/{{project_id}}/milestones",
                 ProjectMilestone, label="Milestone", paginated=False, actions=("complete",),
                 item_path=f"{API}/projects/milestones/{{id}}"),
    ResourceSpec("projects", "timesheets", f"{API}/projects/timesheets", Timesheet,
                 label="Timesheet", actions=("approve",)),

    # Pricing
    ResourceSpec("pricing", "price-books", f"{API}/pricing/price-books", PriceBook,
                 label="Price Book"),
    ResourceSpec("pricing", "discounts", f"{API}/pricing/discounts", Discount, label="Discount"),
    ResourceSpec("pricing", "promotions", f"{API}/pricing/promotions", Promotion,
                 label="Promotion"),

    # Sourcing
    ResourceSpec("sourcing", "events", f"{API}/sourcing/events", SourcingEvent,
                 label="Sourcing Event", can_get=True, actions=("publish",)),
    ResourceSpec("sourcing", "bids", f"{API}/sourcing/events/{{event_id}}/bids", Bid,
                 label="Bid", paginated=False, actions=("accept",),
                 item_path=f"{API}/sourcing/bids/{{id}}"),

    # Config
    ResourceSpec("config", "settings", f"{API}/config", ConfigEntry,
                 label="Setting", paginated=False, can_create=False, can_update=True),

    # Rules
    ResourceSpec("rules", "rules", f"{API}/rules", Rule,
                 label="Rule", paginated=False, can_delete=True),
    ResourceSpec("rules", "rulesets", f"{API}/rules/rulesets", Ruleset,
                 label="Ruleset", paginated=False),

    # Approval workflow
    ResourceSpec("approval-workflow", "workflows", f"{API}/approval-workflow/workflows",
                 ApprovalWorkflow, label="Workflow", paginated=False),
    ResourceSpec("approval-workflow", "requests", f"{API}/approval-workflow/requests",
                 ApprovalRequest, label="Approval Request", can_create=False,
                 actions=("approve", "reject")),

    # Credit
    ResourceSpec("credit", "profiles", f"{API}/credit/profiles", CreditProfile,
                 label="Credit Profile", paginated=False, can_create=False),
    ResourceSpec("credit", "transactions", f"{API}/credit/customers/{{customer_id}}/transactions",
                 CreditTransaction, label="Credit Transaction", paginated=False,
                 can_create=False),
    ResourceSpec("credit", "holds", f"{API}/credit/customers/{{customer_id}}/holds", CreditHold,
                 label="Credit Hold", paginated=False, can_create=False),

    # CRM
    ResourceSpec("crm", "leads", f"{API}/crm/leads", Lead, label="Lead"),
    ResourceSpec("crm", "opportunities", f"{API}/crm/opportunities", Opportunity,
                 label="Opportunity", actions=("stage",)),

    # Point of sale
    ResourceSpec("pos", "stores", f"{API}/pos/stores", POSStore,
                 label="Store", can_get=True, create_model=POSStoreCreate),
    ResourceSpec("pos", "transactions", f"{API}/pos/transactions", POSTransaction,
                 label="POS Transaction", can_create=False, actions=("void",)),

    # E-commerce
    ResourceSpec("ecommerce", "platforms", f"{API}/ecommerce/platforms", EcommercePlatform,
                 label="Platform", create_model=EcommercePlatformCreate),
    ResourceSpec("ecommerce", "orders", f"{API}/ecommerce/orders", EcommerceOrder,
                 label="E-commerce Order", can_create=False, actions=("link", "fulfillment")),

    # Documents
    ResourceSpec("documents", "folders", f"{API}/documents/folders", Folder,
                 label="Folder", paginated=False, create_model=FolderCreate),
    ResourceSpec("documents", "documents", f"{API}/documents/documents", Document,
                 label="Document", paginated=False, can_get=True, actions=("checkout",),
                 create_model=DocumentCreate),

    # Payments
    ResourceSpec("payments", "customer-payments", f"{API}/payments/customer/{{customer_id}}",
                 Payment, label="Payment", paginated=False, can_create=False),

    # Notifications and audit
    ResourceSpec("notifications", "notifications", f"{API}/notifications", Notification,
                 label="Notification", paginated=False, can_create=False, actions=("read",)),
    ResourceSpec("audit", "logs", f"{API}/audit-logs", AuditLog,
                 label="Audit Log", can_create=False),
]

RESOURCES: Dict[Tuple[str, str], ResourceSpec] = {spec.key: spec for spec in _SPECS}


def get_resource_spec(module: str, name: str) -> ResourceSpec:
    """Look up a resource, raising UnknownResourceError when it is not in the catalog"""
    try:
        return RESOURCES[(module, name)]
    except KeyError:
        raise UnknownResourceError(f"Unknown resource: {module}/{name}") from None


def list_modules() -> Dict[str, List[str]]:
    """Module name -> resource names"""
    modules: Dict[str, List[str]] = {}
    for module, name in RESOURCES:
        modules.setdefault(module, []).append(name)
    return modules
