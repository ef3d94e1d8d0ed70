"""Persistence layer for feed posts."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import Post
from app.infrastructure.models import PostModel
from app.utils import ensure_app_timezone


class PostRepository:
    """Create and fetch :class:`Post` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, post_id: int) -> Post | None:
        model = self.session.get(PostModel, post_id)
        return self._to_entity(model) if model else None

    def create(self, post: Post) -> Post:
        model = PostModel(
            user_id=post.author_id,
            content=post.content,
            post_type=post.post_type,
            is_item_post=post.is_item_post,
            item_type=post.item_type,
            item_name=post.item_name,
            item_description=post.item_description,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: PostModel) -> Post:
        return Post(
            id=model.id,
            author_id=model.user_id,
            post_type=model.post_type,
            content=model.content,
            is_item_post=bool(model.is_item_post),
            item_type=model.item_type,
            item_name=model.item_name,
            item_description=model.item_description,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["PostRepository"]
