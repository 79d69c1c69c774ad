"""
Notification Center

Keeps the notification list and the unread count fresh while it is running.
start() refreshes immediately and then once per interval; stop() cancels the
loop and no further request is issued. A failed refresh is logged and the
loop carries on (that includes a response that does not parse as
notifications); an expired session ends polling.

Author: TM3
Date: 2025-10-17
"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable, List, Optional, Union

from pydantic import ValidationError

from erp_console.core.config import settings
from erp_console.core.errors import ErpApiError, SessionExpiredError
from erp_console.domain import Notification
from erp_console.repositories.notification_repository import NotificationRepository

logger = logging.getLogger(__name__)

UpdateCallback = Callable[[List[Notification], int], None]


def _parse_timestamp(value: Union[str, datetime]) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_relative_time(timestamp: Union[str, datetime], now: Optional[datetime] = None) -> str:
    """
    Human label for a notification timestamp

    Under a minute: "Just now"; then "Nm ago", "Nh ago", "Nd ago" up to a
    week; older timestamps show the date.
    """
    try:
        created = _parse_timestamp(timestamp)
    except ValueError:
        return str(timestamp)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    minutes = int((now - created).total_seconds() // 60)
    hours = minutes // 60
    days = hours // 24

    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    if days < 7:
        return f"{days}d ago"
    return created.date().isoformat()


class NotificationCenter:
    """
    Polls notifications and the unread count

    Usage:
        async with NotificationCenter(api.notifications, on_update=show) as center:
            ...
    """

    def __init__(self, repository: NotificationRepository, interval: float = None,
                 sleep: Callable[[float], Awaitable] = asyncio.sleep,
                 on_update: Optional[UpdateCallback] = None):
        self.repository = repository
        self.interval = interval if interval is not None else settings.ERP_NOTIFICATION_POLL_SECONDS
        self.sleep = sleep
        self.on_update = on_update

        self.notifications: List[Notification] = []
        self.unread_count = 0
        self.refresh_count = 0
        self.last_error: Optional[BaseException] = None
        self._task: Optional[asyncio.Task] = None
        self._stopped = True

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def refresh(self) -> None:
        """One list request and one unread-count request, issued together"""
        try:
            notifications, unread = await asyncio.gather(
                self.repository.list(),
                self.repository.unread_count(),
            )
        except SessionExpiredError:
            self._stopped = True
            raise
        except ErpApiError as e:
            self.last_error = e
            logger.error(f"Failed to load notifications: {e}")
            return
        except ValidationError as e:
            self.last_error = ErpApiError("Unexpected notification data from the ERP backend")
            logger.error(f"Failed to load notifications: {e}")
            return

        self.refresh_count += 1
        self.last_error = None
        self.notifications = notifications
        self.unread_count = unread
        if self.on_update:
            self.on_update(notifications, unread)

    async def _run(self) -> None:
        while not self._stopped:
            await self.refresh()
            if self._stopped:
                break
            await self.sleep(self.interval)

    def start(self) -> asyncio.Task:
        """Begin polling (must be called from a running event loop)"""
        if self.running:
            return self._task
        self._stopped = False
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug(f"Notification polling started (every {self.interval}s)")
        return self._task

    def stop(self) -> None:
        self._stopped = True
        if self._task is not None and not self._task.done():
            self._task.cancel()
        logger.debug("Notification polling stopped")

    async def join(self) -> None:
        """Wait for the polling loop to end"""
        if self._task is None:
            return
        try:
            await self._task
        except asyncio.CancelledError:
            pass

    async def __aenter__(self) -> "NotificationCenter":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.stop()
        await self.join()

    async def mark_read(self, notification_id: str) -> None:
        await self.repository.mark_read(notification_id)
        await self.refresh()

    async def mark_all_read(self) -> None:
        await self.repository.mark_all_read()
        await self.refresh()
