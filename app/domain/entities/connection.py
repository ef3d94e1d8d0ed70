"""Domain entity representing a connection request between users."""

from dataclasses import dataclass
from datetime import datetime

CONNECTION_STATUS_PENDING = "pending"
CONNECTION_STATUS_ACCEPTED = "accepted"


@dataclass
class Connection:
    """Request from ``requester_id`` to connect with ``addressee_id``."""

    id: int | None
    requester_id: int
    addressee_id: int
    status: str = CONNECTION_STATUS_PENDING
    created_at: datetime | None = None
