"""Test fixtures: a fresh in-memory database per test.

Learn: Testing pattern for async SQLAlchemy + FastAPI:

1. Each test gets its own aiosqlite in-memory engine. StaticPool keeps a
   single connection open, so every session sees the same database.
2. get_db is overridden to hand out a new session per request, exactly
   like production, just bound to the test engine.
3. The engine is disposed after the test: the database vanishes with it.

Sessions are real: tests sign a token with create_session_token and
send it in the Cookie header, so the access gate runs for every request.
"""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from solosphere.db.engine import create_tables, get_db
from solosphere.main import app
from tests.helpers import ALICE, auth_headers, job_payload

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture()
async def session_factory():
    """Session factory bound to a per-test in-memory database."""
    engine = create_async_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)
    try:
        yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    finally:
        await engine.dispose()


@pytest_asyncio.fixture()
async def client(session_factory):
    """HTTP client with the app's get_db pointed at the test database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture()
async def posted_job(client) -> str:
    """A job posted by alice; returns its id."""
    r = await client.post("/add-job", json=job_payload(), headers=auth_headers(ALICE))
    assert r.status_code == 201
    return r.json()["insertedId"]
