"""Shared fixtures: a throwaway SQLite database and seeded users."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

TEST_DB_PATH = Path(__file__).parent / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from app.application.use_cases import create_user  # noqa: E402
from app.infrastructure import database  # noqa: E402
from app.infrastructure import models  # noqa: E402,F401
from app.infrastructure.notifications import (  # noqa: E402
    LiveChannel,
    NotificationConnectionManager,
    NotificationPublisher,
)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def setup_database():
    """Recreate every table so each test starts from an empty store."""

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)
    yield
    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)


def pytest_sessionfinish(session, exitstatus):
    database.engine.dispose()
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()


@pytest.fixture()
def session():
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def users(session):
    """Four users: alice authors, the rest receive."""

    return {
        name: create_user(session, full_name=f"{name.title()} Doe", username=name)
        for name in ("alice", "bob", "carol", "dave")
    }


@pytest.fixture()
def manager() -> NotificationConnectionManager:
    return NotificationConnectionManager()


@pytest.fixture()
def publisher(manager) -> NotificationPublisher:
    return NotificationPublisher(manager)


@pytest.fixture()
def drain():
    """Return a coroutine that closes a channel and decodes what it had queued."""

    async def _drain(channel: LiveChannel) -> list[dict]:
        channel.close()
        frames = [frame async for frame in channel.frames()]
        # The first frame is always the handshake.
        return [json.loads(frame[len("data: "):]) for frame in frames[1:]]

    return _drain
