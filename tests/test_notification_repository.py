"""Tests for notification persistence helpers."""

from sqlalchemy import event

from app.domain.entities import Notification, NotificationKind, PostMetadata
from app.infrastructure import database
from app.infrastructure.repositories import NotificationRepository, UserRepository


def _draft(recipient_id, actor_id):
    return Notification(
        id=None,
        recipient_id=recipient_id,
        kind=NotificationKind.POST,
        text="Alice Doe published a new post",
        actor_id=actor_id,
        subject_ref=1,
        metadata=PostMetadata(post_type="text"),
    )


def test_create_many_does_not_read_rows_back(session, users):
    alice = users["alice"]
    recipients = [users[name].id for name in ("bob", "carol", "dave")]
    statements: list[str] = []

    def _record(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(database.engine, "before_cursor_execute", _record)
    try:
        created = NotificationRepository(session).create_many(
            [_draft(recipient_id, alice.id) for recipient_id in recipients]
        )
    finally:
        event.remove(database.engine, "before_cursor_execute", _record)

    assert not [s for s in statements if s.lstrip().upper().startswith("SELECT")]
    assert [n.recipient_id for n in created] == recipients
    assert all(n.id is not None for n in created)
    assert all(n.created_at is not None and n.created_at.tzinfo is not None for n in created)
    assert all(n.read is False for n in created)
    assert len({n.id for n in created}) == len(recipients)


def test_create_many_rows_are_committed(session, users):
    created = NotificationRepository(session).create_many(
        [_draft(users["bob"].id, users["alice"].id)]
    )

    other = database.SessionLocal()
    try:
        stored = NotificationRepository(other).get_for_user(
            created[0].id, user_id=users["bob"].id
        )
    finally:
        other.close()

    assert stored is not None
    assert stored.metadata == PostMetadata(post_type="text")


def test_get_for_user_is_scoped_to_recipient(session, users):
    (created,) = NotificationRepository(session).create_many(
        [_draft(users["bob"].id, users["alice"].id)]
    )
    repository = NotificationRepository(session)

    assert repository.get_for_user(created.id, user_id=users["bob"].id).id == created.id
    assert repository.get_for_user(created.id, user_id=users["carol"].id) is None


def test_get_many_users_skips_unknown_ids(session, users):
    found = UserRepository(session).get_many([users["alice"].id, None, 999])

    assert list(found) == [users["alice"].id]
    assert found[users["alice"].id].username == "alice"
