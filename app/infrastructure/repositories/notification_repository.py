"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable

from sqlalchemy.orm import Session

from app.domain.entities import Notification, NotificationKind, metadata_from_dict
from app.infrastructure.models import NotificationModel
from app.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Store and query :class:`Notification` objects.

    Every query is scoped by recipient; callers never see another user's rows.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: int,
        *,
        limit: int | None = 20,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        query = query.filter(NotificationModel.user_id == user_id)
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get_for_user(self, notification_id: int, *, user_id: int) -> Notification | None:
        model = self._get_model_for_user(notification_id, user_id=user_id)
        return self._to_entity(model) if model else None

    def count_unread(
        self, user_id: int, *, kind: NotificationKind | str | None = None
    ) -> int:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.read.is_(False))
        )
        if kind is not None:
            query = query.filter(NotificationModel.kind == NotificationKind(kind).value)
        return query.count()

    def create(self, notification: Notification) -> Notification:
        model = self._to_model(notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def create_many(self, notifications: Iterable[Notification]) -> list[Notification]:
        """Insert ``notifications`` in a single transaction.

        Either every row is committed or none is. Entities are built from the
        flushed rows, which already carry their ids and column defaults, so no
        row is read back after the commit.
        """

        models = [self._to_model(notification) for notification in notifications]
        if not models:
            return []
        self.session.add_all(models)
        self.session.flush()
        created = [self._to_entity(model) for model in models]
        self.session.commit()
        return created

    def mark_as_read(self, notification_id: int, *, user_id: int) -> Notification | None:
        """Flag one notification as read and return it.

        Returns ``None`` when the notification does not exist or belongs to a
        different user. Already-read notifications are returned unchanged.
        """

        model = self._get_model_for_user(notification_id, user_id=user_id)
        if model is None:
            return None
        if not model.read:
            model.read = True
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def mark_all_as_read(
        self, user_id: int, *, kind: NotificationKind | str | None = None
    ) -> int:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.read.is_(False))
        )
        if kind is not None:
            query = query.filter(NotificationModel.kind == NotificationKind(kind).value)
        updated = query.update({NotificationModel.read: True}, synchronize_session=False)
        self.session.commit()
        return updated

    def _get_model_for_user(
        self, notification_id: int, *, user_id: int
    ) -> NotificationModel | None:
        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.id == notification_id)
            .filter(NotificationModel.user_id == user_id)
            .one_or_none()
        )

    @staticmethod
    def _to_model(notification: Notification) -> NotificationModel:
        return NotificationModel(
            user_id=notification.recipient_id,
            kind=NotificationKind(notification.kind).value,
            actor_id=notification.actor_id,
            subject_ref=notification.subject_ref,
            text=notification.text,
            payload=notification.metadata.to_dict(),
            read=notification.read,
            created_at=(
                ensure_app_naive_datetime(notification.created_at)
                or ensure_app_naive_datetime(now_in_app_timezone())
            ),
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        kind = NotificationKind(model.kind)
        return Notification(
            id=model.id,
            recipient_id=model.user_id,
            kind=kind,
            text=model.text,
            actor_id=model.actor_id,
            subject_ref=model.subject_ref,
            metadata=metadata_from_dict(kind, model.payload),
            read=bool(model.read),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["NotificationRepository"]
