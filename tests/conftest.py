"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os

# Must be set before the application modules build their engine and settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("NOTETAKING_SKIP_LIFESPAN_DB", "1")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")

import fnmatch  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from notetaking.core import redis_client as redis_module  # noqa: E402
from notetaking.core.models.base import BaseModel  # noqa: E402
from notetaking.database import get_db_session  # noqa: E402
from notetaking.main import app  # noqa: E402

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_PASSWORD = "password1"


@pytest.fixture
async def test_engine():
    """Fresh SQLite in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    # SQLite only enforces foreign keys (and their CASCADEs) when asked
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
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_session(session_factory):
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def test_app(session_factory):
    """App whose requests each get their own session on the test database."""

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class FakeRedis:
    """In-memory stand-in for redis.asyncio.Redis (string values only)."""

    def __init__(self):
        self.storage = {}
        self.expirations = {}
        self.closed = False

    async def ping(self):
        return True

    async def get(self, key):
        return self.storage.get(key)

    async def set(self, key, value):
        self.storage[key] = value
        return True

    async def setex(self, key, seconds, value):
        self.storage[key] = value
        self.expirations[key] = seconds
        return True

    async def delete(self, *keys):
        removed = 0
        for key in keys:
            if self.storage.pop(key, None) is not None:
                removed += 1
        return removed

    async def incr(self, key):
        value = int(self.storage.get(key, 0)) + 1
        self.storage[key] = str(value)
        return value

    async def scan_iter(self, match=None):
        for key in list(self.storage):
            if match is None or fnmatch.fnmatch(key, match):
                yield key

    async def aclose(self):
        self.closed = True


@pytest.fixture(autouse=True)
def reset_redis_client():
    """Each test starts with a fresh, disconnected cache client."""
    redis_module._redis_client = None
    yield
    redis_module._redis_client = None


@pytest.fixture
def fake_redis():
    """Connect the cache client singleton to an in-memory fake."""
    fake = FakeRedis()
    redis_module.get_redis_client().redis = fake
    return fake


async def register_user(client, email, password=TEST_PASSWORD, full_name="Test User"):
    return await client.post(
        "/api/users", json={"email": email, "password": password, "fullName": full_name}
    )


async def login_user(client, email, password=TEST_PASSWORD):
    return await client.post("/api/auth/login", json={"email": email, "password": password})


@pytest.fixture
def make_user(async_client):
    """Register and log in a user through the API; returns the login body plus headers."""

    async def _make_user(email="a@x.com", password=TEST_PASSWORD, full_name="Test User"):
        response = await register_user(async_client, email, password, full_name)
        assert response.status_code == 200, response.text
        login = await login_user(async_client, email, password)
        assert login.status_code == 200, login.text
        body = login.json()
        body["userId"] = response.json()["id"]
        body["headers"] = {"Authorization": f"Bearer {body['accessToken']}"}
        return body

    return _make_user


@pytest.fixture
async def auth_headers(make_user):
    user = await make_user()
    return user["headers"]
