"""Create a user and print an access token for exercising the notification API."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.users.create_user import create_user
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.security import create_access_token


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create a user and issue a bearer token for the notification API.",
    )
    parser.add_argument("username", help="Unique username, stored lowercase")
    parser.add_argument(
        "--full-name",
        default=None,
        help="Display name used in notification texts (defaults to the username)",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            full_name=args.full_name or args.username,
            username=args.username,
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"Could not create user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not store user in the database: {exc}") from exc
    else:
        print(
            "User created:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.full_name}\n"
            f"  Username: {user.username}\n"
            f"  Token: {create_access_token(user.id)}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
