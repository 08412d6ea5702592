"""SQLAlchemy database handle and per-request session dependency."""

import asyncio
import logging
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from product_api.config import Settings
from product_api.infrastructure.database.base import Base

logger = logging.getLogger(__name__)


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _is_in_memory(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


class Database:
    """Owns the engine and session factory for one application instance.

    An in-memory SQLite database exists per connection, so it is served
    through a single shared connection (``StaticPool``). Sessions on that
    connection share its transaction, so they are handed out one at a time:
    ``session()`` holds a lock from checkout through commit or rollback.
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.url = _get_async_url(database_url)
        engine_kwargs: dict = {}
        self._session_lock: asyncio.Lock | None = None
        if _is_in_memory(self.url):
            engine_kwargs["poolclass"] = StaticPool
            self._session_lock = asyncio.Lock()

        self.engine = create_async_engine(self.url, echo=echo, future=True, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_schema(self) -> None:
        """Create every registered table. The schema is never migrated."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready (%s)", make_url(self.url).get_backend_name())

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Open a session, serialized against other sessions when in memory."""
        if self._session_lock is None:
            async with self.session_factory() as session:
                yield session
            return

        async with self._session_lock:
            async with self.session_factory() as session:
                yield session

    async def dispose(self) -> None:
        await self.engine.dispose()


def build_database(settings: Settings) -> Database:
    """Create the database handle described by ``settings``."""
    return Database(settings.database_url, echo=(settings.app_env == "development"))


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency — yields an async DB session per request."""
    database: Database = request.app.state.database
    async with database.session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
