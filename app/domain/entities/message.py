"""Domain entity representing a direct message."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Message:
    """Direct message between two users."""

    id: int | None
    sender_id: int
    recipient_id: int
    message_type: str = "text"
    text: str | None = None
    media_url: str | None = None
    created_at: datetime | None = None
