"""SQLAlchemy model for feed posts."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class PostModel(Base):
    """Database representation of a feed post."""

    __tablename__ = "post"
    __table_args__ = (Index("ix_post_item_type_created", "item_type", "created_at"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    content = Column(Text, nullable=True)
    post_type = Column(String(20), nullable=False)
    is_item_post = Column(Boolean, nullable=False, default=False)
    item_type = Column(String(10), nullable=True)
    item_name = Column(String(120), nullable=True)
    item_description = Column(Text, nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
