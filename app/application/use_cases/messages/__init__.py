"""Use cases for direct messages."""

from .send_message import MESSAGE_TYPES, send_message

__all__ = ["MESSAGE_TYPES", "send_message"]
