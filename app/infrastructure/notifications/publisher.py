"""Best-effort live delivery of notification events."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from anyio import from_thread

from app.domain.entities import Notification, NotificationKind, User

from .channel import ChannelClosedError, notification_event
from .manager import NotificationConnectionManager


class NotificationPublisher:
    """Push serialized events to whichever channel the registry routes a user to.

    Live delivery is an optimization: the notification is already stored when
    a push is attempted, so a missing or broken channel is never an error for
    the caller. Broken channels are evicted from the registry on the spot.
    """

    def __init__(
        self,
        manager: NotificationConnectionManager,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._manager = manager
        self._logger = logger or logging.getLogger(__name__)
        self._pending: set[asyncio.Task[bool]] = set()

    async def deliver(self, user_id: int, event: dict[str, Any]) -> bool:
        """Write ``event`` to the live channel of ``user_id``.

        Returns ``True`` when a frame was queued on an open channel.
        """

        channel = self._manager.lookup(user_id)
        if channel is None:
            self._logger.debug("User %s has no live channel; push skipped", user_id)
            return False
        try:
            channel.send(event)
        except ChannelClosedError as exc:
            self._manager.unregister(user_id, channel)
            self._logger.warning("Dropped stale live channel for user %s: %s", user_id, exc)
            return False
        return True

    def dispatch(self, user_id: int | None, event: dict[str, Any]) -> None:
        """Schedule ``event`` for ``user_id`` without waiting for the result."""

        if not user_id:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Sync route handlers run in AnyIO worker threads; hop to the loop.
            try:
                from_thread.run(self.deliver, user_id, event)
            except RuntimeError:
                self._logger.debug(
                    "No event loop reachable; live push to user %s skipped", user_id
                )
        else:
            task = loop.create_task(self.deliver(user_id, event))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

    def dispatch_notification(
        self, notification: Notification, *, actor: User | None = None
    ) -> None:
        """Schedule the ``new_notification`` frame for ``notification``'s recipient."""

        event = notification_event(serialize_notification(notification, actor=actor))
        self.dispatch(notification.recipient_id, event)

    async def flush(self) -> None:
        """Wait for every push scheduled from the event loop to finish."""

        while self._pending:
            await asyncio.gather(*list(self._pending))


def _serialize_actor(actor: User | None) -> dict[str, Any] | None:
    """Return the display summary of the user who triggered a notification."""

    if actor is None:
        return None
    return {"id": actor.id, "full_name": actor.full_name, "username": actor.username}


def serialize_notification(
    notification: Notification, *, actor: User | None = None
) -> dict[str, Any]:
    """Return the JSON-ready representation of ``notification``.

    ``actor`` is embedded so clients can name the sender without a lookup.
    """

    return {
        "id": notification.id,
        "user_id": notification.recipient_id,
        "kind": NotificationKind(notification.kind).value,
        "actor_id": notification.actor_id,
        "actor": _serialize_actor(actor),
        "subject_ref": notification.subject_ref,
        "text": notification.text,
        "metadata": notification.metadata.to_dict(),
        "read": notification.read,
        "created_at": notification.created_at.isoformat()
        if notification.created_at
        else None,
    }


__all__ = ["NotificationPublisher", "serialize_notification"]
