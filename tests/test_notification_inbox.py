"""Tests for listing, counting and acknowledging notifications."""

from datetime import datetime, timedelta, timezone

import pytest

from app.application.use_cases.notifications import (
    NotificationNotFoundError,
    get_notification_counts,
    list_notifications,
    mark_all_notifications_as_read,
    mark_notification_as_read,
    mark_notifications_as_read_by_kind,
)
from app.domain.entities import (
    ConnectionMetadata,
    MessageMetadata,
    Notification,
    NotificationKind,
    PostMetadata,
)
from app.infrastructure.repositories import NotificationRepository

_BASE_TIME = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)

_METADATA = {
    NotificationKind.POST: PostMetadata(post_type="text"),
    NotificationKind.MESSAGE: MessageMetadata(message_type="text", preview="hi"),
    NotificationKind.CONNECTION: ConnectionMetadata(),
}


def _seed(session, recipient_id, kinds, actor_id=None):
    repository = NotificationRepository(session)
    return [
        repository.create(
            Notification(
                id=None,
                recipient_id=recipient_id,
                kind=kind,
                text=f"{kind.value} #{index}",
                actor_id=actor_id,
                subject_ref=index,
                metadata=_METADATA[kind],
                created_at=_BASE_TIME + timedelta(minutes=index),
            )
        )
        for index, kind in enumerate(kinds)
    ]


def test_list_returns_newest_first_with_unread_total(session, users):
    bob = users["bob"]
    seeded = _seed(
        session,
        bob.id,
        [NotificationKind.POST, NotificationKind.MESSAGE, NotificationKind.CONNECTION],
    )

    page = list_notifications(session, bob.id, limit=2)

    assert [n.id for n in page.notifications] == [seeded[2].id, seeded[1].id]
    assert page.unread_count == 3


def test_list_never_returns_other_users_rows(session, users):
    _seed(session, users["bob"].id, [NotificationKind.POST])

    page = list_notifications(session, users["carol"].id)

    assert page.notifications == []
    assert page.unread_count == 0


def test_mark_as_read_is_idempotent(session, users):
    bob = users["bob"]
    (notification,) = _seed(session, bob.id, [NotificationKind.MESSAGE])

    first = mark_notification_as_read(session, notification.id, user_id=bob.id)
    second = mark_notification_as_read(session, notification.id, user_id=bob.id)

    assert first.read is True
    assert second.read is True
    assert get_notification_counts(session, bob.id).total == 0


def test_mark_as_read_of_foreign_notification_is_not_found(session, users):
    (notification,) = _seed(session, users["bob"].id, [NotificationKind.POST])

    with pytest.raises(NotificationNotFoundError):
        mark_notification_as_read(session, notification.id, user_id=users["carol"].id)
    with pytest.raises(NotificationNotFoundError):
        mark_notification_as_read(session, 12345, user_id=users["bob"].id)

    assert NotificationRepository(session).count_unread(users["bob"].id) == 1


def test_mark_all_only_touches_the_caller(session, users):
    bob, carol = users["bob"], users["carol"]
    _seed(session, bob.id, [NotificationKind.POST, NotificationKind.MESSAGE])
    _seed(session, carol.id, [NotificationKind.POST])

    assert mark_all_notifications_as_read(session, user_id=bob.id) == 2
    assert mark_all_notifications_as_read(session, user_id=bob.id) == 0

    assert get_notification_counts(session, bob.id).total == 0
    assert get_notification_counts(session, carol.id).total == 1


def test_mark_by_kind_leaves_other_kinds_unread(session, users):
    bob = users["bob"]
    _seed(
        session,
        bob.id,
        [NotificationKind.POST, NotificationKind.POST, NotificationKind.MESSAGE],
    )

    assert mark_notifications_as_read_by_kind(session, user_id=bob.id, kind="post") == 2

    counts = get_notification_counts(session, bob.id)
    assert (counts.post, counts.message, counts.total) == (0, 1, 1)


def test_counts_match_store_filters(session, users):
    bob = users["bob"]
    seeded = _seed(
        session,
        bob.id,
        [
            NotificationKind.POST,
            NotificationKind.POST,
            NotificationKind.MESSAGE,
            NotificationKind.CONNECTION,
        ],
    )
    mark_notification_as_read(session, seeded[0].id, user_id=bob.id)

    counts = get_notification_counts(session, bob.id)
    repository = NotificationRepository(session)

    assert counts.post == repository.count_unread(bob.id, kind=NotificationKind.POST) == 1
    assert counts.message == 1
    assert counts.connection == 1
    assert counts.total == repository.count_unread(bob.id) == 3


def test_reserved_kinds_count_towards_total_only(session, users):
    bob = users["bob"]
    NotificationRepository(session).create(
        Notification(id=None, recipient_id=bob.id, kind=NotificationKind.LIKE, text="liked")
    )

    counts = get_notification_counts(session, bob.id)

    assert (counts.post, counts.message, counts.connection, counts.total) == (0, 0, 0, 1)


def test_metadata_round_trips_through_store(session, users):
    (stored,) = _seed(session, users["bob"].id, [NotificationKind.MESSAGE])

    (loaded,) = list_notifications(session, users["bob"].id).notifications

    assert loaded.metadata == stored.metadata == _METADATA[NotificationKind.MESSAGE]
    assert loaded.created_at.tzinfo is not None


def test_list_resolves_actor_of_each_notification(session, users):
    alice, bob = users["alice"], users["bob"]
    _seed(session, bob.id, [NotificationKind.POST, NotificationKind.MESSAGE], actor_id=alice.id)
    _seed(session, bob.id, [NotificationKind.CONNECTION])

    page = list_notifications(session, bob.id)

    assert set(page.actors) == {alice.id}
    assert page.actors[alice.id].full_name == "Alice Doe"


def test_mark_as_read_of_read_notification_returns_it_unchanged(session, users):
    bob = users["bob"]
    (notification,) = _seed(session, bob.id, [NotificationKind.POST])
    first = mark_notification_as_read(session, notification.id, user_id=bob.id)

    again = mark_notification_as_read(session, notification.id, user_id=bob.id)

    assert again.id == first.id
    assert again.read is True
    assert again.created_at == first.created_at
