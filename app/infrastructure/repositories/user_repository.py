"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.models import UserModel
from app.utils import ensure_app_timezone


class UserRepository:
    """Provide read and create operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_many(self, user_ids: Iterable[int]) -> dict[int, User]:
        """Return the users with the given ids keyed by id; unknown ids are skipped."""

        ids = {user_id for user_id in user_ids if user_id is not None}
        if not ids:
            return {}
        query = self.session.query(UserModel).filter(UserModel.id.in_(ids))
        return {model.id: self._to_entity(model) for model in query.all()}

    def get_by_username(self, username: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .filter(UserModel.username == username)
            .one_or_none()
        )
        return self._to_entity(model) if model else None

    def list_ids_excluding(self, user_id: int) -> Sequence[int]:
        """Return the id of every user other than ``user_id``, lowest first."""

        query = (
            self.session.query(UserModel.id)
            .filter(UserModel.id != user_id)
            .order_by(UserModel.id.asc())
        )
        return [row.id for row in query.all()]

    def create(self, user: User) -> User:
        model = UserModel(
            full_name=user.full_name,
            username=user.username,
            is_active=user.is_active,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            full_name=model.full_name,
            username=model.username,
            is_active=bool(model.is_active),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["UserRepository"]
