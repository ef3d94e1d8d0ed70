"""ORM models used by the application infrastructure."""

from .connection import ConnectionModel
from .message import MessageModel
from .notification import NotificationModel
from .post import PostModel
from .user import UserModel

__all__ = [
    "ConnectionModel",
    "MessageModel",
    "NotificationModel",
    "PostModel",
    "UserModel",
]
