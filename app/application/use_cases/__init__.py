"""Aggregate application use cases."""

from .connections import request_connection
from .messages import send_message
from .posts import create_post
from .users import create_user

__all__ = [
    "create_post",
    "create_user",
    "request_connection",
    "send_message",
]
