"""Connection registry for live notification streams."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .channel import LiveChannel

logger = logging.getLogger(__name__)


class NotificationConnectionManager:
    """Track the single live channel currently routed for each user.

    Registering a second channel for a user replaces the first one; there is
    no multiplexing across tabs or devices. The superseded channel is left
    open until its transport closes but no longer receives events.

    All methods run on the event loop thread and the mapping is not locked.
    A multi-threaded caller would need to guard it.
    """

    def __init__(self) -> None:
        self._connections: dict[int, LiveChannel] = {}

    def register(self, user_id: int, channel: LiveChannel) -> LiveChannel | None:
        """Route ``user_id`` to ``channel`` and return the channel it replaced."""

        previous = self._connections.get(user_id)
        self._connections[user_id] = channel
        if previous is not None and previous is not channel:
            logger.info("Live channel for user %s superseded by a newer stream", user_id)
            return previous
        return None

    def unregister(self, user_id: int, channel: LiveChannel | None = None) -> bool:
        """Drop the entry for ``user_id``.

        When ``channel`` is given the entry is removed only if it still points
        at that channel, so a stale stream closing late never evicts its
        replacement. Returns ``True`` when an entry was removed.
        """

        current = self._connections.get(user_id)
        if current is None:
            return False
        if channel is not None and current is not channel:
            return False
        del self._connections[user_id]
        return True

    def lookup(self, user_id: int) -> LiveChannel | None:
        return self._connections.get(user_id)

    def is_online(self, user_id: int) -> bool:
        return user_id in self._connections

    def online_users(self) -> Iterator[int]:
        return iter(list(self._connections))

    def __len__(self) -> int:
        return len(self._connections)


__all__ = ["NotificationConnectionManager"]
