"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os
from uuid import uuid4

# secrets are required settings; set them before anything imports the app
os.environ.setdefault("JWT_SECRET", "test-access-secret")
os.environ.setdefault("REFRESH_TOKEN_SECRET", "test-refresh-secret")
os.environ.setdefault("DB_URI", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SKIP_CREATE_TABLES", "true")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from src.noteshare.config import get_settings  # noqa: E402
from src.noteshare.core import models  # noqa: E402,F401
from src.noteshare.core.models.base import BaseModel  # noqa: E402
from src.noteshare.core.models.user import User  # noqa: E402
from src.noteshare.database import get_db_session  # noqa: E402
from src.noteshare.main import app  # noqa: E402
from src.noteshare.security.jwt import TokenService  # noqa: E402
from src.noteshare.security.password import hash_password  # noqa: E402

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_PASSWORD = "TestPassword123!"


@pytest.fixture
def test_password():
    return TEST_PASSWORD


@pytest.fixture
def test_settings():
    return get_settings()


@pytest.fixture
async def test_engine():
    """Fresh SQLite in-memory engine per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    # SQLite only honours ON DELETE CASCADE with foreign keys switched on
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
    """Database session for one test."""
    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def test_app(test_session):
    """App with the DB session dependency pointed at the test session."""

    async def _override_get_db():
        yield test_session

    app.dependency_overrides[get_db_session] = _override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Async HTTP client talking to the app in-process."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def token_service(test_settings):
    return TokenService(test_settings)


@pytest.fixture
def make_user(test_session):
    """Factory that inserts a user straight into the database."""

    async def _make_user(username=None, password=TEST_PASSWORD):
        user = User(
            username=username or f"user_{uuid4().hex[:8]}",
            email="someone@example.com",
            password_hash=hash_password(password),
        )
        test_session.add(user)
        await test_session.commit()
        return user

    return _make_user


@pytest.fixture
async def test_user(make_user):
    return await make_user()


@pytest.fixture
def auth_headers(token_service):
    """Build an Authorization header for a user."""

    def _headers(user):
        return {"Authorization": f"Bearer {token_service.issue_access_token(user.id)}"}

    return _headers
