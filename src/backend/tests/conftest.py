"""
Pytest fixtures for the ballot backend tests.
"""

import os
from collections.abc import AsyncGenerator, Callable
from pathlib import Path
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

# Set test environment variables before importing app
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "false")

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker  # noqa: E402

from db.session import build_engine, create_tables  # noqa: E402


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """
    File-backed SQLite engine with the full schema.

    A file (not :memory:) so that concurrent sessions get their own
    connections, like they would against PostgreSQL.
    """
    test_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'ballot_test.db'}")
    await create_tables(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """A single session for tests that do not need concurrency."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_voter(session_factory: async_sessionmaker[AsyncSession]) -> Callable:
    """
    Factory that registers a voter profile directly in the database.

    Admins are promoted through the repository, as the operator script does.
    """
    from repositories.voter_repository import VoterRepository

    async def _make_voter(
        identity: str,
        voter_id: str | None = None,
        is_admin: bool = False,
    ) -> None:
        async with session_factory() as session:
            repo = VoterRepository(session)
            await repo.create(
                identity=identity,
                voter_id=voter_id or f"VOTER-{identity}",
                official_name=f"Official {identity}",
                phone_number="+15550100",
            )
            if is_admin:
                await repo.set_admin_flag(identity, True)
            await session.commit()

    return _make_voter


@pytest.fixture
def token_for() -> Callable[[str], str]:
    """Issue an identity token the way the identity provider would."""
    from core.security import create_identity_token

    return create_identity_token


@pytest.fixture
def auth_headers(token_for: Callable[[str], str]) -> Callable[[str], dict[str, str]]:
    """Build Authorization headers for an identity."""

    def _headers(identity: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token_for(identity)}"}

    return _headers


@pytest.fixture
async def app(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[Any, None]:
    """FastAPI application wired to the per-test database."""
    from db.session import get_db
    from main import app as fastapi_app

    async def _get_test_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = _get_test_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
async def client(app: Any) -> AsyncGenerator[AsyncClient, None]:
    """Async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
