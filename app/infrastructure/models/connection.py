"""SQLAlchemy model for connection requests."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class ConnectionModel(Base):
    """Database representation of a connection request."""

    __tablename__ = "connection"

    id = Column(Integer, primary_key=True, index=True)
    from_user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    to_user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="pending")
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
