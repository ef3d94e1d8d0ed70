"""Realtime notification helpers for the infrastructure layer."""

from .channel import (
    EVENT_CONNECTED,
    EVENT_NEW_NOTIFICATION,
    HANDSHAKE_EVENT,
    KEEPALIVE_FRAME,
    ChannelClosedError,
    LiveChannel,
    encode_event,
    notification_event,
)
from .manager import NotificationConnectionManager
from .publisher import NotificationPublisher, serialize_notification
from .stream import live_event_stream

__all__ = [
    "ChannelClosedError",
    "EVENT_CONNECTED",
    "EVENT_NEW_NOTIFICATION",
    "HANDSHAKE_EVENT",
    "KEEPALIVE_FRAME",
    "LiveChannel",
    "NotificationConnectionManager",
    "NotificationPublisher",
    "encode_event",
    "live_event_stream",
    "notification_event",
    "serialize_notification",
]
