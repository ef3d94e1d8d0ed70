"""Use case for creating users."""

from sqlalchemy.orm import Session

from app.domain.entities import User
from app.infrastructure.repositories import UserRepository


def create_user(session: Session, *, full_name: str, username: str) -> User:
    """Create a new user ensuring unique usernames."""

    full_name = full_name.strip()
    username = username.strip().lower()
    if not full_name:
        raise ValueError("Full name is required")
    if not username:
        raise ValueError("Username is required")

    repository = UserRepository(session)
    if repository.get_by_username(username):
        raise ValueError("Username is already taken")

    return repository.create(User(id=None, full_name=full_name, username=username))
