"""Direct message schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class MessageCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    to_user_id: int = Field(..., ge=1)
    message_type: Literal["text", "image"] = "text"
    text: str | None = Field(default=None, max_length=5000)
    media_url: str | None = Field(default=None, max_length=255)


class MessageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    sender_id: int
    recipient_id: int
    message_type: str
    text: str | None
    media_url: str | None
    created_at: datetime | None
