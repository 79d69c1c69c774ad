"""
Governance Domain Models

Compliance (GDPR), configuration, business rules, approval workflows and
audit logs.
"""
from typing import Any, Dict, List, Optional

from pydantic import Field

from erp_console.domain.common import WireModel


# ==================== COMPLIANCE ====================

class DataSubject(WireModel):
    id: str
    subject_type: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[str] = None


class ConsentRecord(WireModel):
    id: str
    data_subject_id: str
    purpose: str
    status: Optional[str] = None
    granted_at: Optional[str] = None
    withdrawn_at: Optional[str] = None


class DSARRequest(WireModel):
    """Data Subject Access Request"""

    id: str
    request_number: Optional[str] = None
    data_subject_id: str
    request_type: Optional[str] = None
    status: Optional[str] = None
    due_date: Optional[str] = None
    completed_at: Optional[str] = None


class DataBreach(WireModel):
    id: str
    breach_number: Optional[str] = None
    title: str
    severity: Optional[str] = None
    status: Optional[str] = None
    affected_records: int = 0
    discovered_at: Optional[str] = None


# ==================== CONFIG ====================

class ConfigEntry(WireModel):
    key: str
    value: Any = None
    category: Optional[str] = None
    description: Optional[str] = None


# ==================== RULES ====================

class Rule(WireModel):
    id: str
    name: str
    entity_type: Optional[str] = None
    ruleset_id: Optional[str] = None
    priority: int = 0
    conditions: List[Dict[str, Any]] = Field(default_factory=list)
    actions: List[Dict[str, Any]] = Field(default_factory=list)
    is_active: bool = True


class Ruleset(WireModel):
    id: str
    name: str
    entity_type: Optional[str] = None
    description: Optional[str] = None
    is_active: bool = True


# ==================== APPROVAL WORKFLOW ====================

class ApprovalWorkflow(WireModel):
    id: str
    code: str
    name: str
    description: Optional[str] = None
    document_type: str
    approval_type: Optional[str] = None
    min_amount: Optional[int] = None
    max_amount: Optional[int] = None
    auto_approve_below: Optional[int] = None
    escalation_hours: Optional[int] = None
    status: Optional[str] = None
    levels: List[Dict[str, Any]] = Field(default_factory=list)


class ApprovalRequest(WireModel):
    id: str
    request_number: str
    workflow_id: str
    document_type: str
    document_id: Optional[str] = None
    document_number: Optional[str] = None
    requested_by: Optional[str] = None
    requested_at: Optional[str] = None
    amount: int = 0
    currency: Optional[str] = None
    status: str = "Pending"
    current_level: Optional[int] = None
    due_date: Optional[str] = None
    rejection_reason: Optional[str] = None


# ==================== AUDIT ====================

class AuditLog(WireModel):
    id: str
    entity_type: str
    entity_id: Optional[str] = None
    action: str
    user_id: Optional[str] = None
    old_values: Optional[Dict[str, Any]] = None
    new_values: Optional[Dict[str, Any]] = None
    created_at: Optional[str] = None
