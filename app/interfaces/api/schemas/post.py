"""Post schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    post_type: Literal["text", "image", "text_with_image"]
    content: str | None = Field(default=None, max_length=5000)
    is_item_post: bool = False
    item_type: Literal["lost", "found"] | None = None
    item_name: str | None = Field(default=None, max_length=120)
    item_description: str | None = Field(default=None, max_length=2000)


class PostRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    author_id: int
    post_type: str
    content: str | None
    is_item_post: bool
    item_type: str | None
    item_name: str | None
    item_description: str | None
    created_at: datetime | None
