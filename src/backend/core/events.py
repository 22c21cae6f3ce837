"""
Application lifecycle event handlers.

Manages startup and shutdown of logging and database connections.
"""

from typing import Callable

import structlog
from fastapi import FastAPI

from core.config import settings
from core.logging_config import configure_logging
from db.session import close_db, init_db

logger = structlog.get_logger(__name__)


def create_start_app_handler(app: FastAPI) -> Callable:
    """Create startup event handler."""

    async def start_app() -> None:
        configure_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
        logger.info("starting_api", app=settings.APP_NAME, env=settings.APP_ENV)

        await init_db()
        logger.info("database_initialized")

    return start_app


def create_stop_app_handler(app: FastAPI) -> Callable:
    """Create shutdown event handler."""

    async def stop_app() -> None:
        logger.info("shutting_down_api")
        await close_db()
        logger.info("shutdown_complete")

    return stop_app
