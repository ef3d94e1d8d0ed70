"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Query, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.notifications import (
    NotificationConnectionManager,
    NotificationPublisher,
)
from app.infrastructure.repositories import UserRepository
from app.infrastructure.security import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)


def _credentials_exception(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_exception() from exc

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError) as exc:
        raise _credentials_exception() from exc

    user = UserRepository(db).get(user_id)
    if user is None:
        raise _credentials_exception("User no longer exists")
    return user


def get_current_user(
    bearer_token: str | None = Depends(oauth2_scheme),
    token: str | None = Query(
        default=None,
        description="Access token for clients that cannot send headers (EventSource)",
    ),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the bearer header or ``?token=``."""

    raw_token = bearer_token or token
    if not raw_token:
        raise _credentials_exception("Not authenticated")
    return resolve_current_user(raw_token, db)


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user is active."""

    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user",
        )
    return current_user


def get_connection_manager(request: Request) -> NotificationConnectionManager:
    """Return the process-wide live channel registry."""

    return request.app.state.notification_manager


def get_notification_publisher(request: Request) -> NotificationPublisher:
    """Return the process-wide push dispatcher."""

    return request.app.state.notification_publisher
