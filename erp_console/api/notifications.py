"""
Notification bell and global search
"""
from fastapi import APIRouter, Depends, Query

from erp_console.api.deps import get_api
from erp_console.repositories.erp_api import ErpApi
from erp_console.services.global_search import mock_search
from erp_console.services.notification_center import NotificationCenter, format_relative_time

router = APIRouter(prefix="/console", tags=["Notifications"])


async def _snapshot(center: NotificationCenter):
    await center.refresh()
    if center.last_error is not None:
        raise center.last_error
    return {
        "unread_count": center.unread_count,
        "notifications": [
            {**n.model_dump(mode="json"), "time_ago": format_relative_time(n.created_at)}
            for n in center.notifications
        ],
    }


@router.get("/notifications")
async def notifications(api: ErpApi = Depends(get_api)):
    """Latest notifications and the unread count (one request of each)"""
    return await _snapshot(NotificationCenter(api.notifications))


@router.post("/notifications/read")
async def mark_all_read(api: ErpApi = Depends(get_api)):
    await api.notifications.mark_all_read()
    return {"message": "All notifications marked as read"}


@router.post("/notifications/{notification_id}/read")
async def mark_read(notification_id: str, api: ErpApi = Depends(get_api)):
    await api.notifications.mark_read(notification_id)
    return {"message": "Notification marked as read"}


@router.get("/search")
async def search(q: str = Query("", description="Search term")):
    """Search the sample catalog (not connected to the backend)"""
    return {"query": q, "results": mock_search(q)}
