import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.infrastructure.database import engine, initialize_database
from app.infrastructure.notifications import (
    NotificationConnectionManager,
    NotificationPublisher,
)
from app.interfaces.api.routes import register_routes

logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup; drain pending pushes and release the engine on shutdown."""

    initialize_database()
    logger.info("Notification service started")
    yield
    await app.state.notification_publisher.flush()
    engine.dispose()
    logger.info(
        "Notification service stopped with %d live streams open",
        len(app.state.notification_manager),
    )


def create_app() -> FastAPI:
    """Create the FastAPI application with its own connection registry."""

    settings = get_settings()
    app = FastAPI(lifespan=lifespan, title="Campus Lost & Found notifications")

    # One registry per process; restarts start empty and clients reconnect.
    manager = NotificationConnectionManager()
    app.state.notification_manager = manager
    app.state.notification_publisher = NotificationPublisher(
        manager, logger=logging.getLogger("app.notifications.push")
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
