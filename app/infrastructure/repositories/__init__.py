"""Repository implementations for infrastructure layer."""

from .connection_repository import ConnectionRepository
from .message_repository import MessageRepository
from .notification_repository import NotificationRepository
from .post_repository import PostRepository
from .user_repository import UserRepository

__all__ = [
    "ConnectionRepository",
    "MessageRepository",
    "NotificationRepository",
    "PostRepository",
    "UserRepository",
]
