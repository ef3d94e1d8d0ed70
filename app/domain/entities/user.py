"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Member of the campus network as seen by the notification service."""

    id: int | None
    full_name: str
    username: str
    is_active: bool = True
    created_at: datetime | None = None
