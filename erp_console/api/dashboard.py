"""
Dashboard endpoint
"""
from fastapi import APIRouter, Depends

from erp_console.api.deps import get_api
from erp_console.repositories.erp_api import ErpApi
from erp_console.services.dashboard_service import DashboardService

router = APIRouter(tags=["Dashboard"])


@router.get("/")
async def dashboard(api: ErpApi = Depends(get_api)):
    """Headline counts with links to each module page"""
    return await DashboardService(api).load_stats()
