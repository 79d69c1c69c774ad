"""
Service Desk and IT Asset Domain Models
"""
from typing import Optional

from pydantic import BaseModel, Field

from erp_console.domain.common import WireModel

TICKET_PRIORITIES = ("Critical", "High", "Medium", "Low")
TICKET_STATUSES = ("New", "Open", "Pending", "Resolved", "Closed")


class Ticket(WireModel):
    id: str
    ticket_number: Optional[str] = None
    subject: str
    description: Optional[str] = None
    priority: str = "Medium"
    status: str = "New"
    ticket_type: Optional[str] = None
    assigned_to: Optional[str] = None
    created_at: Optional[str] = None


class TicketCreate(BaseModel):
    subject: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    priority: str = "Medium"
    ticket_type: str = "Incident"


class KnowledgeArticle(WireModel):
    id: str
    title: str
    content: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    views: int = 0


class ITAsset(WireModel):
    id: str
    asset_tag: Optional[str] = None
    name: str
    asset_type: Optional[str] = None
    status: Optional[str] = None
    serial_number: Optional[str] = None
    assigned_to: Optional[str] = None
    purchase_cost: Optional[float] = None


class SoftwareLicense(WireModel):
    id: str
    name: str
    vendor: Optional[str] = None
    license_type: Optional[str] = None
    total_seats: int = 0
    used_seats: int = 0
    expiry_date: Optional[str] = None

    @property
    def available_seats(self) -> int:
        return max(self.total_seats - self.used_seats, 0)
