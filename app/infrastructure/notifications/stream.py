"""Async generator backing the live notification event stream."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from .channel import LiveChannel
from .manager import NotificationConnectionManager

logger = logging.getLogger(__name__)


async def live_event_stream(
    manager: NotificationConnectionManager,
    user_id: int,
    *,
    max_pending: int = 100,
    keepalive: float | None = None,
) -> AsyncIterator[str]:
    """Register a fresh channel for ``user_id`` and yield its frames.

    The channel is registered when iteration starts and unregistered when the
    response ends, whether the client hung up or the channel broke.
    """

    channel = LiveChannel(user_id, max_pending=max_pending)
    manager.register(user_id, channel)
    logger.info("Notification stream opened for user %s", user_id)
    try:
        async for frame in channel.frames(keepalive=keepalive):
            yield frame
    finally:
        channel.close()
        manager.unregister(user_id, channel)
        logger.info("Notification stream closed for user %s", user_id)


__all__ = ["live_event_stream"]
