"""Generate notifications for committed domain writes and push them live.

Each helper is called by a domain writer after its own commit. Notification
delivery is best-effort relative to that write: failures are logged and
swallowed here so the caller's response is never affected. Helpers are not
idempotent; calling one twice for the same write creates two notifications.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import (
    ConnectionMetadata,
    MessageMetadata,
    Notification,
    NotificationKind,
    PostMetadata,
    User,
)
from app.infrastructure.notifications import NotificationPublisher
from app.infrastructure.repositories import (
    ConnectionRepository,
    MessageRepository,
    NotificationRepository,
    PostRepository,
    UserRepository,
)
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

MEDIA_MESSAGE_PREVIEW = "New media message"

_F = TypeVar("_F", bound=Callable[..., list[Notification]])


def _best_effort(func: _F) -> _F:
    """Turn any failure of ``func`` into a logged, empty result."""

    @functools.wraps(func)
    def wrapper(session: Session, *args, **kwargs) -> list[Notification]:
        try:
            return func(session, *args, **kwargs)
        except SQLAlchemyError:
            session.rollback()
            logger.exception("Notification fan-out %s failed to persist", func.__name__)
        except Exception:
            session.rollback()
            logger.exception("Notification fan-out %s failed", func.__name__)
        return []

    return wrapper  # type: ignore[return-value]


def _persist_notification(
    session: Session,
    publisher: NotificationPublisher,
    notification: Notification,
    *,
    actor: User,
) -> list[Notification]:
    saved = NotificationRepository(session).create(notification)
    publisher.dispatch_notification(saved, actor=actor)
    return [saved]


@_best_effort
def notify_new_post(
    session: Session,
    publisher: NotificationPublisher,
    *,
    post_id: int,
    author_id: int,
) -> list[Notification]:
    """Notify every user except the author that a new post was published.

    All rows go in with one bulk insert; pushes only start once it commits.
    """

    post = PostRepository(session).get(post_id)
    if post is None:
        logger.debug("Post %s vanished before fan-out", post_id)
        return []

    users = UserRepository(session)
    author = users.get(author_id)
    if author is None:
        logger.debug("Author %s of post %s not found", author_id, post_id)
        return []

    recipients = users.list_ids_excluding(author.id)
    if not recipients:
        return []

    metadata = PostMetadata(
        post_type=post.post_type,
        is_item_post=post.is_item_post,
        item_type=post.item_type,
        item_name=post.item_name,
    )
    text = f"{author.full_name} published a new post"
    created_at = now_in_app_timezone()
    drafts = [
        Notification(
            id=None,
            recipient_id=recipient_id,
            kind=NotificationKind.POST,
            text=text,
            actor_id=author.id,
            subject_ref=post.id,
            metadata=metadata,
            created_at=created_at,
        )
        for recipient_id in recipients
    ]
    saved = NotificationRepository(session).create_many(drafts)
    for notification in saved:
        publisher.dispatch_notification(notification, actor=author)
    logger.info("Post %s fanned out to %d recipients", post.id, len(saved))
    return saved


@_best_effort
def notify_new_message(
    session: Session,
    publisher: NotificationPublisher,
    *,
    message_id: int,
    sender_id: int,
    recipient_id: int,
    preview_length: int | None = None,
) -> list[Notification]:
    """Notify the addressee of a direct message."""

    message = MessageRepository(session).get(message_id)
    if message is None:
        logger.debug("Message %s vanished before fan-out", message_id)
        return []

    sender = UserRepository(session).get(sender_id)
    if sender is None:
        logger.debug("Sender %s of message %s not found", sender_id, message_id)
        return []

    if preview_length is None:
        preview_length = get_settings().message_preview_length
    preview = (message.text or "")[:preview_length] or MEDIA_MESSAGE_PREVIEW

    return _persist_notification(
        session,
        publisher,
        Notification(
            id=None,
            recipient_id=recipient_id,
            kind=NotificationKind.MESSAGE,
            text=f"{sender.full_name} sent you a message",
            actor_id=sender.id,
            subject_ref=message.id,
            metadata=MessageMetadata(message_type=message.message_type, preview=preview),
            created_at=now_in_app_timezone(),
        ),
        actor=sender,
    )


@_best_effort
def notify_connection_request(
    session: Session,
    publisher: NotificationPublisher,
    *,
    connection_id: int,
    sender_id: int,
    recipient_id: int,
) -> list[Notification]:
    """Notify the addressee of a pending connection request."""

    connection = ConnectionRepository(session).get(connection_id)
    if connection is None:
        logger.debug("Connection %s vanished before fan-out", connection_id)
        return []

    sender = UserRepository(session).get(sender_id)
    if sender is None:
        logger.debug("Sender %s of connection %s not found", sender_id, connection_id)
        return []

    return _persist_notification(
        session,
        publisher,
        Notification(
            id=None,
            recipient_id=recipient_id,
            kind=NotificationKind.CONNECTION,
            text=f"{sender.full_name} wants to connect with you",
            actor_id=sender.id,
            subject_ref=connection.id,
            metadata=ConnectionMetadata(status=connection.status),
            created_at=now_in_app_timezone(),
        ),
        actor=sender,
    )


__all__ = [
    "MEDIA_MESSAGE_PREVIEW",
    "notify_connection_request",
    "notify_new_message",
    "notify_new_post",
]
