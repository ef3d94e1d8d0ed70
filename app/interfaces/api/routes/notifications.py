"""Endpoints and event stream for user notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    NotificationNotFoundError,
    get_notification_counts,
    list_notifications as list_notifications_uc,
    mark_all_notifications_as_read,
    mark_notification_as_read,
    mark_notifications_as_read_by_kind,
    resolve_actors,
)
from app.config import get_settings
from app.domain.entities import Notification, User
from app.infrastructure.database import get_db
from app.infrastructure.notifications import (
    NotificationConnectionManager,
    live_event_stream,
    serialize_notification,
)
from app.interfaces.api.dependencies import (
    get_connection_manager,
    get_current_active_user,
)
from app.interfaces.api.schemas import (
    NotificationBulkReadResponse,
    NotificationCountsRead,
    NotificationCountsResponse,
    NotificationKindRequest,
    NotificationListResponse,
    NotificationRead,
    NotificationReadResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])

_STREAM_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


def _notification_to_schema(
    notification: Notification, actors: dict[int, User]
) -> NotificationRead:
    actor = actors.get(notification.actor_id) if notification.actor_id else None
    return NotificationRead.model_validate(serialize_notification(notification, actor=actor))


@router.get("/stream")
async def stream_notifications(
    current_user: User = Depends(get_current_active_user),
    manager: NotificationConnectionManager = Depends(get_connection_manager),
) -> StreamingResponse:
    """Open the live notification channel for the authenticated user.

    Only the most recent stream per user receives events.
    """

    settings = get_settings()
    frames = live_event_stream(
        manager,
        current_user.id,
        max_pending=settings.live_channel_buffer_size,
        keepalive=settings.live_channel_keepalive_seconds or None,
    )
    return StreamingResponse(
        frames, media_type="text/event-stream", headers=_STREAM_HEADERS
    )


@router.get("/", response_model=NotificationListResponse)
def list_notifications(
    limit: int | None = Query(default=None, ge=1),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationListResponse:
    """Return the most recent notifications plus the unread total."""

    settings = get_settings()
    effective_limit = min(
        limit or settings.notification_page_size, settings.notification_page_size_max
    )
    page = list_notifications_uc(db, current_user.id, limit=effective_limit)
    return NotificationListResponse(
        notifications=[_notification_to_schema(n, page.actors) for n in page.notifications],
        unread_count=page.unread_count,
    )


@router.get("/counts", response_model=NotificationCountsResponse)
def read_notification_counts(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationCountsResponse:
    """Return unread counts per kind and overall."""

    counts = get_notification_counts(db, current_user.id)
    return NotificationCountsResponse(
        counts=NotificationCountsRead(
            post=counts.post,
            message=counts.message,
            connection=counts.connection,
            total=counts.total,
        )
    )


@router.patch("/read-all", response_model=NotificationBulkReadResponse)
def read_all_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationBulkReadResponse:
    """Mark every notification of the authenticated user as read."""

    updated = mark_all_notifications_as_read(db, user_id=current_user.id)
    return NotificationBulkReadResponse(
        message="All notifications marked as read", updated=updated
    )


@router.patch("/read-by-kind", response_model=NotificationBulkReadResponse)
def read_notifications_by_kind(
    payload: NotificationKindRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationBulkReadResponse:
    """Mark every notification of one kind as read."""

    updated = mark_notifications_as_read_by_kind(
        db, user_id=current_user.id, kind=payload.kind
    )
    return NotificationBulkReadResponse(
        message=f"{payload.kind.value} notifications marked as read", updated=updated
    )


@router.patch("/{notification_id}/read", response_model=NotificationReadResponse)
def read_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationReadResponse:
    """Mark a single notification as read."""

    try:
        notification = mark_notification_as_read(
            db, notification_id, user_id=current_user.id
        )
    except NotificationNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found"
        ) from exc
    actors = resolve_actors(db, [notification])
    return NotificationReadResponse(notification=_notification_to_schema(notification, actors))
