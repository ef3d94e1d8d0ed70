"""Use case for asking another user to connect."""

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import notify_connection_request
from app.domain.entities import Connection, User
from app.infrastructure.notifications import NotificationPublisher
from app.infrastructure.repositories import ConnectionRepository, UserRepository


class ConnectionAlreadyExistsError(ValueError):
    """Raised when the two users already have a request between them."""


def request_connection(
    session: Session,
    publisher: NotificationPublisher,
    *,
    requester: User,
    addressee_id: int,
) -> Connection:
    """Persist a pending connection request and notify the addressee."""

    if addressee_id == requester.id:
        raise ValueError("Cannot connect with yourself")
    if UserRepository(session).get(addressee_id) is None:
        raise LookupError("User not found")

    repository = ConnectionRepository(session)
    if repository.get_between(requester.id, addressee_id) is not None:
        raise ConnectionAlreadyExistsError(
            "A connection request already exists between these users"
        )

    connection = repository.create(
        Connection(id=None, requester_id=requester.id, addressee_id=addressee_id)
    )
    notify_connection_request(
        session,
        publisher,
        connection_id=connection.id,
        sender_id=requester.id,
        recipient_id=addressee_id,
    )
    return connection
