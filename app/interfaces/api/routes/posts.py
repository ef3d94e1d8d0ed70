"""Routes for publishing feed posts."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.posts import create_post as create_post_uc
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationPublisher
from app.interfaces.api.dependencies import (
    get_current_active_user,
    get_notification_publisher,
)
from app.interfaces.api.schemas import PostCreate, PostRead

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("/", response_model=PostRead, status_code=status.HTTP_201_CREATED)
def create_post(
    post_in: PostCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
) -> PostRead:
    """Publish a post; every other user is notified."""

    try:
        post = create_post_uc(
            db,
            publisher,
            author=current_user,
            **post_in.model_dump(),
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return PostRead.model_validate(post)
