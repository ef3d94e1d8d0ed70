"""Read-side use cases: bulk fetch, unread counts and read acknowledgements."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from app.domain.entities import Notification, NotificationKind, User
from app.infrastructure.repositories import NotificationRepository, UserRepository


class NotificationNotFoundError(LookupError):
    """Raised when a notification does not exist for the requesting user."""


@dataclass(frozen=True)
class NotificationPage:
    """Most recent notifications plus the user's total unread count.

    ``actors`` maps each ``actor_id`` on the page to the user it names.
    """

    notifications: list[Notification]
    unread_count: int
    actors: dict[int, User] = field(default_factory=dict)


@dataclass(frozen=True)
class NotificationCounts:
    """Unread notifications per emitted kind and overall."""

    post: int
    message: int
    connection: int
    total: int


def list_notifications(session: Session, user_id: int, *, limit: int = 20) -> NotificationPage:
    """Return the newest ``limit`` notifications for ``user_id``."""

    repository = NotificationRepository(session)
    notifications = list(repository.list_for_user(user_id, limit=limit))
    return NotificationPage(
        notifications=notifications,
        unread_count=repository.count_unread(user_id),
        actors=resolve_actors(session, notifications),
    )


def resolve_actors(
    session: Session, notifications: Iterable[Notification]
) -> dict[int, User]:
    """Load the users that triggered ``notifications`` in a single query."""

    return UserRepository(session).get_many(n.actor_id for n in notifications)


def get_notification_counts(session: Session, user_id: int) -> NotificationCounts:
    """Count unread notifications straight from the store."""

    repository = NotificationRepository(session)
    return NotificationCounts(
        post=repository.count_unread(user_id, kind=NotificationKind.POST),
        message=repository.count_unread(user_id, kind=NotificationKind.MESSAGE),
        connection=repository.count_unread(user_id, kind=NotificationKind.CONNECTION),
        total=repository.count_unread(user_id),
    )


def mark_notification_as_read(
    session: Session, notification_id: int, *, user_id: int
) -> Notification:
    """Mark one of ``user_id``'s notifications as read.

    Repeating the call is a no-op that still succeeds. Notifications owned by
    someone else are reported as missing.
    """

    repository = NotificationRepository(session)
    notification = repository.get_for_user(notification_id, user_id=user_id)
    if notification is not None and not notification.read:
        notification = repository.mark_as_read(notification_id, user_id=user_id)
    if notification is None:
        raise NotificationNotFoundError(f"Notification {notification_id} not found")
    return notification


def mark_all_notifications_as_read(session: Session, *, user_id: int) -> int:
    """Mark every unread notification of ``user_id`` as read; return how many changed."""

    return NotificationRepository(session).mark_all_as_read(user_id)


def mark_notifications_as_read_by_kind(
    session: Session, *, user_id: int, kind: NotificationKind | str
) -> int:
    """Mark unread notifications of a single ``kind`` as read."""

    return NotificationRepository(session).mark_all_as_read(user_id, kind=kind)


__all__ = [
    "NotificationCounts",
    "NotificationNotFoundError",
    "NotificationPage",
    "get_notification_counts",
    "list_notifications",
    "mark_all_notifications_as_read",
    "mark_notification_as_read",
    "mark_notifications_as_read_by_kind",
    "resolve_actors",
]
