"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import NotificationKind


class NotificationActorRead(BaseModel):
    """User who triggered a notification."""

    id: int
    full_name: str
    username: str


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: int
    kind: NotificationKind
    actor_id: int | None = None
    actor: NotificationActorRead | None = None
    subject_ref: int | None = None
    text: str
    metadata: dict[str, Any] = Field(default_factory=dict)
    read: bool
    created_at: datetime


class NotificationListResponse(BaseModel):
    """Bulk fetch result, newest first."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    notifications: list[NotificationRead]
    unread_count: int = Field(alias="unreadCount")


class NotificationCountsRead(BaseModel):
    post: int
    message: int
    connection: int
    total: int


class NotificationCountsResponse(BaseModel):
    success: bool = True
    counts: NotificationCountsRead


class NotificationReadResponse(BaseModel):
    success: bool = True
    notification: NotificationRead


class NotificationBulkReadResponse(BaseModel):
    success: bool = True
    message: str
    updated: int


class NotificationKindRequest(BaseModel):
    """Payload used to mark every notification of one kind as read."""

    model_config = ConfigDict(extra="forbid")

    kind: NotificationKind


__all__ = [
    "NotificationActorRead",
    "NotificationBulkReadResponse",
    "NotificationCountsRead",
    "NotificationCountsResponse",
    "NotificationKindRequest",
    "NotificationListResponse",
    "NotificationRead",
    "NotificationReadResponse",
]
