"""
Notification Domain Model
"""
from typing import Optional

from erp_console.domain.common import WireModel

NOTIFICATION_TYPES = ("ApprovalRequired", "ApprovalApproved", "ApprovalRejected", "Warning", "Info")


class Notification(WireModel):
    id: str
    title: str
    message: Optional[str] = None
    notification_type: str = "Info"
    entity_type: Optional[str] = None
    entity_id: Optional[str] = None
    read: bool = False
    created_at: str
