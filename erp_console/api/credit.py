"""
Credit management page
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from erp_console.api.deps import get_api
from erp_console.repositories.erp_api import ErpApi
from erp_console.services.credit_service import CreditService, format_cents

router = APIRouter(prefix="/console/credit", tags=["Credit"])


class LimitChange(BaseModel):
    credit_limit: int = Field(..., description="New limit in cents")
    reason: str = ""


class HoldChange(BaseModel):
    reason: str = ""


@router.get("")
async def credit_page(api: ErpApi = Depends(get_api)):
    """Summary, first 50 profiles, customers on hold and high-risk customers"""
    overview = await CreditService(api.credit).load_overview()
    summary = overview["summary"]
    overview["formatted"] = {
        "total_credit_limit": format_cents(summary.total_credit_limit),
        "total_credit_used": format_cents(summary.total_credit_used),
        "total_available": format_cents(summary.total_available),
    }
    return overview


@router.get("/customers/{customer_id}")
async def profile_details(customer_id: str, api: ErpApi = Depends(get_api)):
    return await CreditService(api.credit).load_profile_details(customer_id)


@router.post("/customers/{customer_id}/limit")
async def update_limit(customer_id: str, change: LimitChange, api: ErpApi = Depends(get_api)):
    result = await CreditService(api.credit).update_limit(customer_id, change.credit_limit, change.reason)
    return {"message": "Credit limit updated successfully", "data": result}


@router.post("/customers/{customer_id}/hold")
async def place_hold(customer_id: str, change: HoldChange, api: ErpApi = Depends(get_api)):
    result = await CreditService(api.credit).place_hold(customer_id, change.reason)
    return {"message": "Credit hold placed successfully", "data": result}


@router.post("/customers/{customer_id}/release")
async def release_hold(customer_id: str, change: HoldChange, api: ErpApi = Depends(get_api)):
    result = await CreditService(api.credit).release_hold(customer_id, change.reason)
    return {"message": "Credit hold released successfully", "data": result}
