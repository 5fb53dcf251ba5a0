"""Async SQLAlchemy engine and session factory.

Learn: One engine per process holds the connection pool. Every request
gets its own AsyncSession through the get_db dependency, which is also
the seam tests use to swap in an in-memory database.
"""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from solosphere.config import settings
from solosphere.db.models import Base


def _engine_options(database_url: str) -> dict:
    # SQLite pools don't take sizing arguments
    if make_url(database_url).get_backend_name() == "sqlite":
        return {}
    return {"pool_size": 5, "max_overflow": 15, "pool_pre_ping": True}


engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    **_engine_options(settings.database_url),
)

# Session factory: each request gets its own session.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncSession:
    """FastAPI dependency: yields a session per request, auto-closes."""
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


async def create_tables(bind: AsyncEngine = engine) -> None:
    """Create the jobs and bids tables if they don't exist yet."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
