"""Use case for sending a direct message."""

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import notify_new_message
from app.domain.entities import Message, User
from app.infrastructure.notifications import NotificationPublisher
from app.infrastructure.repositories import MessageRepository, UserRepository

MESSAGE_TYPES = {"text", "image"}


def send_message(
    session: Session,
    publisher: NotificationPublisher,
    *,
    sender: User,
    recipient_id: int,
    message_type: str = "text",
    text: str | None = None,
    media_url: str | None = None,
) -> Message:
    """Persist a message and notify its addressee."""

    if message_type not in MESSAGE_TYPES:
        raise ValueError(f"Unsupported message type '{message_type}'")
    if not text and not media_url:
        raise ValueError("A message needs text or media")
    if recipient_id == sender.id:
        raise ValueError("Cannot send a message to yourself")
    if UserRepository(session).get(recipient_id) is None:
        raise LookupError("Recipient not found")

    message = MessageRepository(session).create(
        Message(
            id=None,
            sender_id=sender.id,
            recipient_id=recipient_id,
            message_type=message_type,
            text=text,
            media_url=media_url,
        )
    )
    notify_new_message(
        session,
        publisher,
        message_id=message.id,
        sender_id=sender.id,
        recipient_id=recipient_id,
    )
    return message
