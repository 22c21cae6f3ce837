"""
Async SQLAlchemy engine and session management.

One engine is shared by the whole process. Request handlers receive a
session through the ``get_db`` dependency; services own the transaction
boundaries (commit on success, rollback on failure).

PostgreSQL (asyncpg) is the production backend. SQLite (aiosqlite) is used
for local development and tests; its connections are configured so that
foreign keys are enforced and every transaction starts with
``BEGIN IMMEDIATE``, which serializes writers the way row locks and unique
indexes do on PostgreSQL.
"""

from typing import Any, AsyncGenerator

import structlog
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from core.config import settings
from db.base import Base

logger = structlog.get_logger(__name__)

# Global engine and session factory (lazy-initialized)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _configure_sqlite(engine: AsyncEngine) -> None:
    """Enable foreign keys and immediate write locks on SQLite connections."""

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        # Hand transaction control to SQLAlchemy so the "begin" hook below applies
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn: Any) -> None:
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for ``url`` with backend-specific setup."""
    kwargs: dict[str, Any] = {"echo": echo}

    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False, "timeout": 30}
        if ":memory:" in url or url in ("sqlite://", "sqlite+aiosqlite://"):
            # In-memory databases only exist per connection
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    engine = create_async_engine(url, **kwargs)
    if url.startswith("sqlite"):
        _configure_sqlite(engine)
    return engine


def get_engine() -> AsyncEngine:
    """Get or create the process-wide engine."""
    global _engine
    if _engine is None:
        _engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get or create the session factory bound to the process-wide engine."""
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _session_factory


async def create_tables(engine: AsyncEngine) -> None:
    """Create all tables known to the ORM metadata."""
    # Import models so they register with Base.metadata
    import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def init_db() -> None:
    """Initialize the engine and, if configured, create missing tables."""
    engine = get_engine()
    if settings.AUTO_CREATE_TABLES:
        await create_tables(engine)
        logger.info("database_tables_ensured", backend=engine.dialect.name)


async def close_db() -> None:
    """Dispose of the engine and its connection pool."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        logger.info("database_engine_disposed")
    _engine = None
    _session_factory = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding a database session.

    Any transaction still open when the request finishes (a read-only one,
    or one abandoned by an exception) is rolled back when the session closes.
    """
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
