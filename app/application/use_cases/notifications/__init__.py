"""Public helpers for emitting and reading notifications."""

from .events import (
    MEDIA_MESSAGE_PREVIEW,
    notify_connection_request,
    notify_new_message,
    notify_new_post,
)
from .inbox import (
    NotificationCounts,
    NotificationNotFoundError,
    NotificationPage,
    get_notification_counts,
    list_notifications,
    mark_all_notifications_as_read,
    mark_notification_as_read,
    mark_notifications_as_read_by_kind,
    resolve_actors,
)

__all__ = [
    "MEDIA_MESSAGE_PREVIEW",
    "NotificationCounts",
    "NotificationNotFoundError",
    "NotificationPage",
    "get_notification_counts",
    "list_notifications",
    "mark_all_notifications_as_read",
    "mark_notification_as_read",
    "mark_notifications_as_read_by_kind",
    "notify_connection_request",
    "notify_new_message",
    "notify_new_post",
    "resolve_actors",
]
