"""Client-side notification list and badge counters."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from app.infrastructure.notifications.channel import EVENT_NEW_NOTIFICATION

COUNTED_KINDS = ("post", "message", "connection")


class ConnectionStatus(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


class NotificationState:
    """Locally held notifications and unread counters.

    The server store is authoritative; this state is reloaded from a bulk
    fetch and patched by live frames in between. Live frames may repeat or
    arrive out of order, so notifications are de-duplicated by id.
    """

    def __init__(self) -> None:
        self.notifications: list[dict[str, Any]] = []
        self.counts: dict[str, int] = {kind: 0 for kind in (*COUNTED_KINDS, "total")}
        self._seen_ids: set[Any] = set()

    def load(
        self,
        notifications: Iterable[Mapping[str, Any]],
        counts: Mapping[str, int] | None = None,
        *,
        unread_count: int | None = None,
    ) -> None:
        """Replace local state with a bulk fetch result."""

        self.notifications = [dict(notification) for notification in notifications]
        self._seen_ids = {n.get("id") for n in self.notifications if n.get("id") is not None}
        if counts is not None:
            for key in self.counts:
                self.counts[key] = max(0, int(counts.get(key, 0)))
        if unread_count is not None:
            self.counts["total"] = max(0, int(unread_count))

    def apply_event(self, event: Mapping[str, Any]) -> bool:
        """Apply one live frame; return ``True`` when it added a notification."""

        if event.get("type") != EVENT_NEW_NOTIFICATION:
            return False
        notification = event.get("notification")
        if not isinstance(notification, Mapping):
            return False

        notification_id = notification.get("id")
        if notification_id is not None:
            if notification_id in self._seen_ids:
                return False
            self._seen_ids.add(notification_id)

        self.notifications.insert(0, dict(notification))
        if not notification.get("read"):
            kind = notification.get("kind")
            if kind in COUNTED_KINDS:
                self.counts[kind] += 1
            self.counts["total"] += 1
        return True

    def acknowledge(self, notification_id: Any, kind: str | None = None) -> None:
        """Drop a notification the server confirmed as read.

        Counters only move when an unread entry was actually removed, so
        repeated acknowledgements leave them in step with the server.
        """

        entry = next((n for n in self.notifications if n.get("id") == notification_id), None)
        if entry is None:
            return
        self.notifications = [n for n in self.notifications if n is not entry]
        if entry.get("read"):
            return
        kind = entry.get("kind") or kind
        if kind in COUNTED_KINDS:
            self.counts[kind] = max(0, self.counts[kind] - 1)
        self.counts["total"] = max(0, self.counts["total"] - 1)

    def acknowledge_all(self) -> None:
        self.notifications = []
        for key in self.counts:
            self.counts[key] = 0
