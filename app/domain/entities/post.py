"""Domain entity representing a feed post."""

from dataclasses import dataclass
from datetime import datetime

ITEM_TYPE_LOST = "lost"
ITEM_TYPE_FOUND = "found"


@dataclass
class Post:
    """Feed entry, optionally describing a lost or found item."""

    id: int | None
    author_id: int
    post_type: str
    content: str | None = None
    is_item_post: bool = False
    item_type: str | None = None
    item_name: str | None = None
    item_description: str | None = None
    created_at: datetime | None = None
