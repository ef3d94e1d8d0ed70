"""Routes for direct messages."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.messages import send_message as send_message_uc
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationPublisher
from app.interfaces.api.dependencies import (
    get_current_active_user,
    get_notification_publisher,
)
from app.interfaces.api.schemas import MessageCreate, MessageRead

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("/", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
def send_message(
    message_in: MessageCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
) -> MessageRead:
    """Send a direct message; the addressee is notified."""

    try:
        message = send_message_uc(
            db,
            publisher,
            sender=current_user,
            recipient_id=message_in.to_user_id,
            message_type=message_in.message_type,
            text=message_in.text,
            media_url=message_in.media_url,
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return MessageRead.model_validate(message)
