from .connection import ConnectionCreate, ConnectionRead
from .message import MessageCreate, MessageRead
from .notification import (
    NotificationBulkReadResponse,
    NotificationCountsRead,
    NotificationCountsResponse,
    NotificationKindRequest,
    NotificationListResponse,
    NotificationRead,
    NotificationReadResponse,
)
from .post import PostCreate, PostRead

__all__ = [
    "ConnectionCreate",
    "ConnectionRead",
    "MessageCreate",
    "MessageRead",
    "NotificationBulkReadResponse",
    "NotificationCountsRead",
    "NotificationCountsResponse",
    "NotificationKindRequest",
    "NotificationListResponse",
    "NotificationRead",
    "NotificationReadResponse",
    "PostCreate",
    "PostRead",
]
