"""
Governance Repositories - compliance, config, rules, approval workflow, audit
"""
from typing import Any, Dict, List, Optional

from erp_console.domain import ApprovalRequest, ApprovalWorkflow, AuditLog, ConfigEntry, Page
from erp_console.repositories.module import ModuleRepository


class ComplianceRepository(ModuleRepository):
    module = "compliance"

    async def get_stats(self) -> Dict[str, Any]:
        return await self.connector.get(self.path("/stats")) or {}

    async def get_data_subjects(self, page: int = 1, per_page: int = 20) -> Page:
        return await self.resource("data-subjects").list(page=page, per_page=per_page)

    async def create_data_subject(self, data: Dict[str, Any]) -> Any:
        return await self.resource("data-subjects").create(data)

    async def get_consents(self, page: int = 1, per_page: int = 20) -> Page:
        return await self.resource("consents").list(page=page, per_page=per_page)

    async def withdraw_consent(self, consent_id: str) -> Any:
        return await self.resource("consents").perform(consent_id, "withdraw")

    async def get_dsars(self, page: int = 1, per_page: int = 20) -> Page:
        return await self.resource("dsars").list(page=page, per_page=per_page)

    async def create_dsar(self, data: Dict[str, Any]) -> Any:
        return await self.resource("dsars").create(data)

    async def complete_dsar(self, dsar_id: str) -> Any:
        return await self.resource("dsars").perform(dsar_id, "complete")

    async def get_breaches(self, page: int = 1, per_page: int = 20) -> Page:
        return await self.resource("breaches").list(page=page, per_page=per_page)

    async def create_breach(self, data: Dict[str, Any]) -> Any:
        return await self.resource("breaches").create(data)


class ConfigRepository(ModuleRepository):
    module = "config"

    async def list_configs(self) -> List[ConfigEntry]:
        return await self.resource("settings").list()

    async def set_config(self, key: str, value: Any) -> Any:
        return await self.resource("settings").update(key, {'value': value})

    async def get_company_settings(self) -> Dict[str, Any]:
        return await self.connector.get(self.path("/company-settings")) or {}

    async def update_company_settings(self, data: Dict[str, Any]) -> Any:
        return await self.connector.put(self.path("/company-settings"), json=data)

    async def get_audit_settings(self) -> Dict[str, Any]:
        return await self.connector.get(self.path("/audit-settings")) or {}

    async def update_audit_settings(self, data: Dict[str, Any]) -> Any:
        return await self.connector.put(self.path("/audit-settings"), json=data)


class RulesRepository(ModuleRepository):
    module = "rules"

    async def list_rules(self) -> List:
        return await self.resource("rules").list()

    async def create_rule(self, data: Dict[str, Any]) -> Any:
        return await self.resource("rules").create(data)

    async def delete_rule(self, rule_id: str) -> Any:
        return await self.resource("rules").delete(rule_id)

    async def list_rulesets(self) -> List:
        return await self.resource("rulesets").list()

    async def create_ruleset(self, data: Dict[str, Any]) -> Any:
        return await self.resource("rulesets").create(data)

    async def execute_rules(self, entity_type: str, entity: Dict[str, Any]) -> Dict[str, Any]:
        """Evaluate the active rules for an entity server-side"""
        return await self.connector.post(
            self.path("/execute"),
            json={'entity_type': entity_type, 'entity': entity},
        ) or {}


class ApprovalWorkflowRepository(ModuleRepository):
    module = "approval-workflow"

    async def list_workflows(self) -> List[ApprovalWorkflow]:
        return await self.resource("workflows").list()

    async def create_workflow(self, data: Dict[str, Any]) -> Any:
        return await self.resource("workflows").create(data)

    async def list_requests(self, page: int = 1, per_page: int = 20,
                            status: Optional[str] = None) -> Page[ApprovalRequest]:
        return await self.resource("requests").list(page=page, per_page=per_page, status=status)

    async def approve_request(self, request_id: str, comments: Optional[str] = None) -> Any:
        return await self.resource("requests").perform(request_id, "approve", {'comments': comments})

    async def reject_request(self, request_id: str, reason: str) -> Any:
        return await self.resource("requests").perform(request_id, "reject", {'reason': reason})


class AuditRepository(ModuleRepository):
    module = "audit"

    async def get_logs(self, entity_type: Optional[str] = None, entity_id: Optional[str] = None,
                       page: Optional[int] = None, per_page: Optional[int] = None) -> Page[AuditLog]:
        """Only non-empty filters are sent"""
        params = {
            'entity_type': entity_type or None,
            'entity_id': entity_id or None,
            'page': page or None,
            'per_page': per_page or None,
        }
        data = await self.connector.get("/api/v1/audit-logs", params=params)
        return self.resource("logs").parse_page(data)
