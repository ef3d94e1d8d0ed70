"""Use case for publishing a feed post."""

from sqlalchemy.orm import Session

from app.application.use_cases.notifications import notify_new_post
from app.domain.entities import ITEM_TYPE_FOUND, ITEM_TYPE_LOST, Post, User
from app.infrastructure.notifications import NotificationPublisher
from app.infrastructure.repositories import PostRepository

POST_TYPES = {"text", "image", "text_with_image"}


def create_post(
    session: Session,
    publisher: NotificationPublisher,
    *,
    author: User,
    post_type: str,
    content: str | None = None,
    is_item_post: bool = False,
    item_type: str | None = None,
    item_name: str | None = None,
    item_description: str | None = None,
) -> Post:
    """Persist a post and then notify every other user about it."""

    if post_type not in POST_TYPES:
        raise ValueError(f"Unsupported post type '{post_type}'")
    if is_item_post:
        if item_type not in (ITEM_TYPE_LOST, ITEM_TYPE_FOUND):
            raise ValueError("Item posts must be marked as 'lost' or 'found'")
        if not item_name:
            raise ValueError("Item posts require an item name")
    else:
        item_type = item_name = item_description = None

    post = PostRepository(session).create(
        Post(
            id=None,
            author_id=author.id,
            post_type=post_type,
            content=content,
            is_item_post=is_item_post,
            item_type=item_type,
            item_name=item_name,
            item_description=item_description,
        )
    )
    notify_new_post(session, publisher, post_id=post.id, author_id=author.id)
    return post
