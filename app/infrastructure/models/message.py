"""SQLAlchemy model for direct messages."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class MessageModel(Base):
    """Database representation of a direct message."""

    __tablename__ = "message"

    id = Column(Integer, primary_key=True, index=True)
    from_user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    to_user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    message_type = Column(String(20), nullable=False, default="text")
    text = Column(Text, nullable=True)
    media_url = Column(String(255), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
