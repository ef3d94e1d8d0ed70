"""Persistence layer for connection requests."""

from __future__ import annotations

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from app.domain.entities import Connection
from app.infrastructure.models import ConnectionModel
from app.utils import ensure_app_timezone


class ConnectionRepository:
    """Create and fetch :class:`Connection` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, connection_id: int) -> Connection | None:
        model = self.session.get(ConnectionModel, connection_id)
        return self._to_entity(model) if model else None

    def get_between(self, first_user_id: int, second_user_id: int) -> Connection | None:
        """Return the request linking both users, whichever side sent it."""

        model = (
            self.session.query(ConnectionModel)
            .filter(
                or_(
                    and_(
                        ConnectionModel.from_user_id == first_user_id,
                        ConnectionModel.to_user_id == second_user_id,
                    ),
                    and_(
                        ConnectionModel.from_user_id == second_user_id,
                        ConnectionModel.to_user_id == first_user_id,
                    ),
                )
            )
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, connection: Connection) -> Connection:
        model = ConnectionModel(
            from_user_id=connection.requester_id,
            to_user_id=connection.addressee_id,
            status=connection.status,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ConnectionModel) -> Connection:
        return Connection(
            id=model.id,
            requester_id=model.from_user_id,
            addressee_id=model.to_user_id,
            status=model.status,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ConnectionRepository"]
