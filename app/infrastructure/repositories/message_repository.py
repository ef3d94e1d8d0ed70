"""Persistence layer for direct messages."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import Message
from app.infrastructure.models import MessageModel
from app.utils import ensure_app_timezone


class MessageRepository:
    """Create and fetch :class:`Message` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, message_id: int) -> Message | None:
        model = self.session.get(MessageModel, message_id)
        return self._to_entity(model) if model else None

    def create(self, message: Message) -> Message:
        model = MessageModel(
            from_user_id=message.sender_id,
            to_user_id=message.recipient_id,
            message_type=message.message_type,
            text=message.text,
            media_url=message.media_url,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: MessageModel) -> Message:
        return Message(
            id=model.id,
            sender_id=model.from_user_id,
            recipient_id=model.to_user_id,
            message_type=model.message_type,
            text=model.text,
            media_url=model.media_url,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["MessageRepository"]
