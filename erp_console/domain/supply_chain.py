"""
Supply Chain Domain Models

Inventory, purchasing, manufacturing and sourcing records.
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from erp_console.domain.common import WireModel


# ==================== INVENTORY ====================

class Product(WireModel):
    id: str
    sku: str
    name: str
    description: Optional[str] = None
    product_type: Optional[str] = None
    category_id: Optional[str] = None
    unit_of_measure: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ProductCreate(BaseModel):
    sku: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    product_type: Optional[str] = "Goods"
    category_id: Optional[str] = None
    unit_of_measure: str = Field("PCS", min_length=1)


class Address(WireModel):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class Warehouse(WireModel):
    id: str
    code: str
    name: str
    address: Optional[Address] = None
    status: Optional[str] = None


class WarehouseCreate(BaseModel):
    code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class StockLevel(WireModel):
    product_id: str
    location_id: Optional[str] = None
    quantity: int = 0
    reserved_quantity: int = 0
    available_quantity: int = 0


class StockMovement(WireModel):
    id: str
    movement_number: Optional[str] = None
    movement_type: str
    product_id: str
    to_location_id: Optional[str] = None
    from_location_id: Optional[str] = None
    quantity: int
    reference: Optional[str] = None
    date: Optional[str] = None


# ==================== PURCHASING ====================

class Vendor(WireModel):
    id: str
    code: str
    name: str
    email: Optional[str] = None
    status: Optional[str] = None


class VendorCreate(BaseModel):
    code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    payment_terms: Optional[int] = Field(None, ge=0)


class OrderLine(WireModel):
    product_id: str
    description: Optional[str] = None
    quantity: int = 0
    unit_price: float = 0
    line_total: Optional[float] = None


class PurchaseOrder(WireModel):
    id: str
    po_number: str
    vendor_id: str
    status: str
    total: float = 0


# ==================== MANUFACTURING ====================

class BillOfMaterials(WireModel):
    id: str
    product_id: Optional[str] = None
    name: Optional[str] = None
    quantity: Optional[float] = None
    components: List[dict] = Field(default_factory=list)


class WorkOrder(WireModel):
    id: str
    order_number: Optional[str] = None
    product_id: Optional[str] = None
    bom_id: Optional[str] = None
    quantity: Optional[float] = None
    status: Optional[str] = None
    planned_start: Optional[str] = None
    planned_end: Optional[str] = None


# ==================== SOURCING ====================

SOURCING_EVENT_TYPES = ("RFQ", "RFP", "RFI", "Auction")


class SourcingEvent(WireModel):
    id: str
    event_number: Optional[str] = None
    title: str
    event_type: str = "RFQ"
    status: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    currency: Optional[str] = None


class Bid(WireModel):
    id: str
    event_id: str
    vendor_id: str
    bid_number: Optional[str] = None
    total_amount: float = 0
    status: Optional[str] = None
    submitted_at: Optional[str] = None
