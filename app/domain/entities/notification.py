"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Union


class NotificationKind(str, Enum):
    """Kinds of domain events that produce notifications."""

    POST = "post"
    MESSAGE = "message"
    CONNECTION = "connection"
    # Reserved: accepted by the store, not produced by any emitter yet.
    LIKE = "like"
    COMMENT = "comment"


EMITTED_KINDS: tuple[NotificationKind, ...] = (
    NotificationKind.POST,
    NotificationKind.MESSAGE,
    NotificationKind.CONNECTION,
)


@dataclass(frozen=True)
class PostMetadata:
    """Extra data attached to ``post`` notifications."""

    post_type: str
    is_item_post: bool = False
    item_type: str | None = None
    item_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MessageMetadata:
    """Extra data attached to ``message`` notifications."""

    message_type: str
    preview: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ConnectionMetadata:
    """Extra data attached to ``connection`` notifications."""

    status: str = "pending"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class EmptyMetadata:
    """Placeholder for kinds without structured metadata."""

    def to_dict(self) -> dict[str, Any]:
        return {}


NotificationMetadata = Union[PostMetadata, MessageMetadata, ConnectionMetadata, EmptyMetadata]


def metadata_from_dict(
    kind: NotificationKind | str, data: dict[str, Any] | None
) -> NotificationMetadata:
    """Rebuild the typed metadata variant for ``kind`` from its stored form."""

    data = data or {}
    kind = NotificationKind(kind)
    if kind is NotificationKind.POST:
        return PostMetadata(
            post_type=str(data.get("post_type") or "text"),
            is_item_post=bool(data.get("is_item_post", False)),
            item_type=data.get("item_type"),
            item_name=data.get("item_name"),
        )
    if kind is NotificationKind.MESSAGE:
        return MessageMetadata(
            message_type=str(data.get("message_type") or "text"),
            preview=str(data.get("preview") or ""),
        )
    if kind is NotificationKind.CONNECTION:
        return ConnectionMetadata(status=str(data.get("status") or "pending"))
    return EmptyMetadata()


@dataclass
class Notification:
    """Event relevant to one recipient.

    Everything except ``read`` is frozen at creation time; ``text`` in
    particular is not recomputed when the actor later renames themselves.
    """

    id: int | None
    recipient_id: int
    kind: NotificationKind
    text: str
    actor_id: int | None = None
    subject_ref: int | None = None
    metadata: NotificationMetadata = field(default_factory=EmptyMetadata)
    read: bool = False
    created_at: datetime | None = None


__all__ = [
    "ConnectionMetadata",
    "EMITTED_KINDS",
    "EmptyMetadata",
    "MessageMetadata",
    "Notification",
    "NotificationKind",
    "NotificationMetadata",
    "PostMetadata",
    "metadata_from_dict",
]
