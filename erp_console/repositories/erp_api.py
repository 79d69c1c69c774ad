"""
ErpApi - one object exposing every ERP module repository
"""
from erp_console.connectors.erp_connector import ErpConnector
from erp_console.repositories.auth_repository import AuthRepository
from erp_console.repositories.base import ResourceRepository
from erp_console.repositories.catalog import get_resource_spec
from erp_console.repositories.commerce_repository import (
    EcommerceRepository, PaymentsRepository, PosRepository, StripeRepository,
)
from erp_console.repositories.credit_repository import CreditRepository
from erp_console.repositories.documents_repository import DocumentsRepository
from erp_console.repositories.finance_repository import FinanceRepository
from erp_console.repositories.governance_repository import (
    ApprovalWorkflowRepository, AuditRepository, ComplianceRepository, ConfigRepository,
    RulesRepository,
)
from erp_console.repositories.notification_repository import NotificationRepository
from erp_console.repositories.people_repository import HrRepository, ProjectsRepository
from erp_console.repositories.sales_repository import CrmRepository, PricingRepository, SalesRepository
from erp_console.repositories.service_repository import AssetsRepository, ServiceDeskRepository
from erp_console.repositories.supply_chain_repository import (
    InventoryRepository, ManufacturingRepository, PurchasingRepository, SourcingRepository,
)


class ErpApi:
    """
    Entry point of the client library

    Usage:
        api = ErpApi(ErpConnector(token_store=FileTokenStore(path)))
        page = await api.inventory.get_products(page=1, per_page=20)
    """

    def __init__(self, connector: ErpConnector = None):
        self.connector = connector or ErpConnector()

        self.auth = AuthRepository(self.connector)
        self.finance = FinanceRepository(self.connector)
        self.inventory = InventoryRepository(self.connector)
        self.sales = SalesRepository(self.connector)
        self.purchasing = PurchasingRepository(self.connector)
        self.manufacturing = ManufacturingRepository(self.connector)
        self.hr = HrRepository(self.connector)
        self.service = ServiceDeskRepository(self.connector)
        self.assets = AssetsRepository(self.connector)
        self.compliance = ComplianceRepository(self.connector)
        self.projects = ProjectsRepository(self.connector)
        self.pricing = PricingRepository(self.connector)
        self.sourcing = SourcingRepository(self.connector)
        self.config = ConfigRepository(self.connector)
        self.rules = RulesRepository(self.connector)
        self.approval_workflow = ApprovalWorkflowRepository(self.connector)
        self.credit = CreditRepository(self.connector)
        self.crm = CrmRepository(self.connector)
        self.notifications = NotificationRepository(self.connector)
        self.audit = AuditRepository(self.connector)
        self.pos = PosRepository(self.connector)
        self.ecommerce = EcommerceRepository(self.connector)
        self.documents = DocumentsRepository(self.connector)
        self.payments = PaymentsRepository(self.connector)
        self.stripe = StripeRepository(self.connector)

    def resource(self, module: str, name: str) -> ResourceRepository:
        """Generic access to any catalogued resource"""
        return ResourceRepository(self.connector, get_resource_spec(module, name))
