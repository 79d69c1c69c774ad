"""
Notification Repository
"""
from typing import Any, List

from erp_console.domain import Notification
from erp_console.repositories.module import ModuleRepository


class NotificationRepository(ModuleRepository):
    module = "notifications"

    async def list(self) -> List[Notification]:
        return await self.resource("notifications").list()

    async def unread_count(self) -> int:
        data = await self.connector.get(self.path("/unread-count"))
        if isinstance(data, dict):
            return int(data.get('count', 0))
        return int(data or 0)

    async def mark_read(self, notification_id: str) -> Any:
        return await self.resource("notifications").perform(notification_id, "read")

    async def mark_all_read(self) -> Any:
        return await self.connector.post(self.path("/read"))
