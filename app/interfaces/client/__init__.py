"""Client side of the notification protocol: bulk fetch plus live stream."""

from .client import NotificationClient
from .events import parse_event_stream
from .reconnect import ExponentialBackoff, FixedDelay, ReconnectPolicy
from .state import ConnectionStatus, NotificationState

__all__ = [
    "ConnectionStatus",
    "ExponentialBackoff",
    "FixedDelay",
    "NotificationClient",
    "NotificationState",
    "ReconnectPolicy",
    "parse_event_stream",
]
