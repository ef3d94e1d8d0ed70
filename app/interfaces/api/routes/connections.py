"""Routes for connection requests."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.application.use_cases.connections import (
    ConnectionAlreadyExistsError,
    request_connection as request_connection_uc,
)
from app.domain.entities import User
from app.infrastructure.database import get_db
from app.infrastructure.notifications import NotificationPublisher
from app.interfaces.api.dependencies import (
    get_current_active_user,
    get_notification_publisher,
)
from app.interfaces.api.schemas import ConnectionCreate, ConnectionRead

router = APIRouter(prefix="/connections", tags=["connections"])


@router.post("/", response_model=ConnectionRead, status_code=status.HTTP_201_CREATED)
def request_connection(
    connection_in: ConnectionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    publisher: NotificationPublisher = Depends(get_notification_publisher),
) -> ConnectionRead:
    """Ask another user to connect; the addressee is notified."""

    try:
        connection = request_connection_uc(
            db,
            publisher,
            requester=current_user,
            addressee_id=connection_in.to_user_id,
        )
    except ConnectionAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return ConnectionRead.model_validate(connection)
