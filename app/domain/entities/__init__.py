"""Domain entities exposed by the application."""

from .connection import (
    CONNECTION_STATUS_ACCEPTED,
    CONNECTION_STATUS_PENDING,
    Connection,
)
from .message import Message
from .notification import (
    EMITTED_KINDS,
    ConnectionMetadata,
    EmptyMetadata,
    MessageMetadata,
    Notification,
    NotificationKind,
    NotificationMetadata,
    PostMetadata,
    metadata_from_dict,
)
from .post import ITEM_TYPE_FOUND, ITEM_TYPE_LOST, Post
from .user import User

__all__ = [
    "CONNECTION_STATUS_ACCEPTED",
    "CONNECTION_STATUS_PENDING",
    "Connection",
    "ConnectionMetadata",
    "EMITTED_KINDS",
    "EmptyMetadata",
    "ITEM_TYPE_FOUND",
    "ITEM_TYPE_LOST",
    "Message",
    "MessageMetadata",
    "Notification",
    "NotificationKind",
    "NotificationMetadata",
    "Post",
    "PostMetadata",
    "User",
    "metadata_from_dict",
]
