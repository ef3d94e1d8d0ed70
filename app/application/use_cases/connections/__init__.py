"""Use cases for connection requests."""

from .request_connection import ConnectionAlreadyExistsError, request_connection

__all__ = ["ConnectionAlreadyExistsError", "request_connection"]
