"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os
import tempfile

# settings are read once at import time, so the environment has to be ready first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["REDIS_ENABLED"] = "false"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="noteshare-logs-")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from noteshare.core.models import BaseModel, User  # noqa: E402
from noteshare.database import get_db_session  # noqa: E402
from noteshare.main import app  # noqa: E402
from noteshare.security.jwt import create_access_token  # noqa: E402
from noteshare.security.password import hash_password  # noqa: E402

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_PASSWORD = "TestPassword123!"
# hashing is slow; every fixture user shares one hash
_PASSWORD_HASH = hash_password(TEST_PASSWORD)


@pytest.fixture
async def test_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    # SQLite only enforces foreign keys when asked to
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
async def async_client(test_session):
    """HTTP client bound to the app, sharing the test session."""

    async def _override_get_db():
        yield test_session

    app.dependency_overrides[get_db_session] = _override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(test_session):
    """Factory creating active users with the shared test password."""

    async def _make_user(email: str, name: str | None = None) -> User:
        user = User(email=email, name=name, password_hash=_PASSWORD_HASH, is_active=True)
        test_session.add(user)
        await test_session.commit()
        await test_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
async def owner(make_user):
    return await make_user("owner@example.com", "Olivia Owner")


@pytest.fixture
async def teammate(make_user):
    return await make_user("teammate@example.com", "Tom Teammate")


@pytest.fixture
async def stranger(make_user):
    return await make_user("stranger@example.com")


def _bearer(user) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token({'sub': str(user.id)})}"}


@pytest.fixture
def headers_for():
    """Authorization header factory: ``headers_for(user)``."""
    return _bearer


@pytest.fixture
def auth_headers(owner):
    return _bearer(owner)
