"""Server-sent event framing and per-stream outbound buffers."""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator
from typing import Any

EVENT_CONNECTED = "connected"
EVENT_NEW_NOTIFICATION = "new_notification"

HANDSHAKE_EVENT: dict[str, Any] = {"type": EVENT_CONNECTED}
KEEPALIVE_FRAME = ": keepalive\n\n"

_CLOSE = object()


class ChannelClosedError(RuntimeError):
    """Raised when writing to a live channel that can no longer deliver frames."""


def encode_event(event: dict[str, Any]) -> str:
    """Return ``event`` as a single ``data:`` line terminated by a blank line."""

    return f"data: {json.dumps(event, separators=(',', ':'))}\n\n"


def notification_event(notification: dict[str, Any]) -> dict[str, Any]:
    """Wrap a serialized notification in the live ``new_notification`` frame."""

    return {"type": EVENT_NEW_NOTIFICATION, "notification": notification}


class LiveChannel:
    """Outbound frame buffer for one open event stream.

    Writers call :meth:`send` from the event loop; the HTTP response drains
    :meth:`frames`. A full buffer means the client stopped reading, so the
    channel closes itself instead of growing without bound.
    """

    def __init__(self, user_id: int, *, max_pending: int = 100) -> None:
        self.user_id = user_id
        self._queue: asyncio.Queue[Any] = asyncio.Queue(maxsize=max_pending + 1)
        self._max_pending = max_pending
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, event: dict[str, Any]) -> None:
        """Queue ``event`` for delivery or raise :class:`ChannelClosedError`."""

        if self._closed:
            raise ChannelClosedError(f"Live channel for user {self.user_id} is closed")
        if self._queue.qsize() >= self._max_pending:
            self.close()
            raise ChannelClosedError(
                f"Live channel for user {self.user_id} exceeded {self._max_pending} pending frames"
            )
        self._queue.put_nowait(encode_event(event))

    def close(self) -> None:
        """Stop accepting frames and wake the reader so the stream can end."""

        if self._closed:
            return
        self._closed = True
        # One slot is reserved for the close marker, so this never overflows.
        self._queue.put_nowait(_CLOSE)

    async def frames(self, *, keepalive: float | None = None) -> AsyncIterator[str]:
        """Yield the handshake frame, then queued frames until the channel closes."""

        yield encode_event(HANDSHAKE_EVENT)
        while True:
            try:
                if keepalive:
                    item = await asyncio.wait_for(self._queue.get(), timeout=keepalive)
                else:
                    item = await self._queue.get()
            except asyncio.TimeoutError:
                yield KEEPALIVE_FRAME
                continue
            if item is _CLOSE:
                return
            yield item


__all__ = [
    "ChannelClosedError",
    "EVENT_CONNECTED",
    "EVENT_NEW_NOTIFICATION",
    "HANDSHAKE_EVENT",
    "KEEPALIVE_FRAME",
    "LiveChannel",
    "encode_event",
    "notification_event",
]
