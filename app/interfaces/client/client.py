"""Async HTTP client that keeps a local notification view in sync."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

import anyio
import httpx

from app.infrastructure.notifications.channel import EVENT_CONNECTED

from .events import parse_event_stream
from .reconnect import FixedDelay, ReconnectPolicy
from .state import ConnectionStatus, NotificationState

logger = logging.getLogger(__name__)

StatusCallback = Callable[[ConnectionStatus], None]
NotificationCallback = Callable[[dict[str, Any]], None]


class NotificationClient:
    """Bulk fetch, live stream and read acknowledgements for one user.

    ``bootstrap`` loads the authoritative state from the inbox endpoints;
    ``listen`` keeps the stream open and reconnects after every drop. Frames
    missed while disconnected are recovered by the next bulk fetch, which runs
    automatically after each successful reconnection.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        reconnect: ReconnectPolicy | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[Any]] = anyio.sleep,
        page_size: int = 20,
        timeout: float = 10.0,
        refresh_on_reconnect: bool = True,
        on_status_change: StatusCallback | None = None,
        on_notification: NotificationCallback | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"Authorization": f"Bearer {token}"},
            transport=transport,
            # The stream stays idle between events, so only reads are unbounded.
            timeout=httpx.Timeout(timeout, read=None),
        )
        self._reconnect = reconnect or FixedDelay()
        self._sleep = sleep
        self._page_size = page_size
        self._refresh_on_reconnect = refresh_on_reconnect
        self.on_status_change = on_status_change
        self.on_notification = on_notification
        self.state = NotificationState()
        self._status = ConnectionStatus.DISCONNECTED

    @property
    def status(self) -> ConnectionStatus:
        return self._status

    async def __aenter__(self) -> "NotificationClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def bootstrap(self) -> None:
        """Replace local state with the latest page and unread counters."""

        page = await self._client.get(
            "/notifications/", params={"limit": self._page_size}
        )
        page.raise_for_status()
        counts = await self._client.get("/notifications/counts")
        counts.raise_for_status()

        body = page.json()
        self.state.load(
            body.get("notifications", []),
            counts.json().get("counts"),
            unread_count=body.get("unreadCount"),
        )

    async def run(self, *, max_attempts: int | None = None) -> None:
        """Bootstrap, then listen until ``max_attempts`` connections were made."""

        await self.bootstrap()
        await self.listen(max_attempts=max_attempts)

    async def listen(self, *, max_attempts: int | None = None) -> None:
        """Consume the live stream, reconnecting after each drop.

        Runs forever unless ``max_attempts`` limits the number of connection
        attempts. No delay follows the final attempt.
        """

        attempts = 0
        failures = 0
        connected_before = False
        while max_attempts is None or attempts < max_attempts:
            attempts += 1
            self._set_status(ConnectionStatus.CONNECTING)
            try:
                async with self._client.stream("GET", "/notifications/stream") as response:
                    response.raise_for_status()
                    async for event in parse_event_stream(response.aiter_lines()):
                        if event.get("type") == EVENT_CONNECTED:
                            self._set_status(ConnectionStatus.CONNECTED)
                            failures = 0
                            if connected_before and self._refresh_on_reconnect:
                                await self.bootstrap()
                            connected_before = True
                            continue
                        self._handle_event(event)
            except httpx.HTTPError as exc:
                logger.warning("Notification stream failed: %s", exc)

            self._set_status(ConnectionStatus.DISCONNECTED)
            failures += 1
            if max_attempts is not None and attempts >= max_attempts:
                break
            delay = self._reconnect.next_delay(failures)
            logger.info("Reconnecting notification stream in %.1fs", delay)
            await self._sleep(delay)

    async def mark_as_read(self, notification_id: int, kind: str | None = None) -> bool:
        """Acknowledge one notification; local state changes only on success."""

        try:
            response = await self._client.patch(f"/notifications/{notification_id}/read")
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Could not mark notification %s as read: %s", notification_id, exc)
            return False
        self.state.acknowledge(notification_id, kind)
        return True

    async def mark_all_as_read(self) -> bool:
        try:
            response = await self._client.patch("/notifications/read-all")
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Could not mark all notifications as read: %s", exc)
            return False
        self.state.acknowledge_all()
        return True

    def _handle_event(self, event: dict[str, Any]) -> None:
        if not self.state.apply_event(event):
            return
        if self.on_notification is not None:
            self.on_notification(event["notification"])

    def _set_status(self, status: ConnectionStatus) -> None:
        if status is self._status:
            return
        self._status = status
        if self.on_status_change is not None:
            self.on_status_change(status)


__all__ = ["NotificationClient"]
