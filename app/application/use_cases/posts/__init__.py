"""Use cases for feed posts."""

from .create_post import POST_TYPES, create_post

__all__ = ["POST_TYPES", "create_post"]
