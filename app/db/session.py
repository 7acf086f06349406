"""Database engine and session lifecycle.

The engine is owned by a ``Database`` object that the application builds at
startup and disposes at shutdown. Request handlers receive sessions through
the ``get_db`` dependency, which reads the handle from ``app.state``.
"""

import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.db.base import Base

logger = logging.getLogger(__name__)


# asyncpg ssl values and their psycopg2 sslmode equivalents
SSL_TO_SSLMODE = {"false": "disable", "true": "require", "require": "require"}


def sync_database_url(url: str) -> str:
    """Sync driver URL for Alembic, which runs migrations without asyncio."""
    parsed = make_url(url)
    if parsed.drivername != "postgresql+asyncpg":
        return parsed.render_as_string(hide_password=False)

    parsed = parsed.set(drivername="postgresql+psycopg2")
    ssl = parsed.query.get("ssl")
    if ssl is not None:
        parsed = parsed.difference_update_query(["ssl"]).update_query_dict(
            {"sslmode": SSL_TO_SSLMODE.get(str(ssl).lower(), str(ssl))}
        )
    return parsed.render_as_string(hide_password=False)


class Database:
    """Async engine plus session factory for one database URL."""

    def __init__(self, url: str, **engine_kwargs):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings) -> "Database":
        """Build a pooled PostgreSQL handle from application settings."""
        kwargs = {"echo": settings.DEBUG, "pool_pre_ping": True}
        if not settings.DATABASE_URL.startswith("sqlite"):
            kwargs["pool_size"] = settings.DATABASE_POOL_SIZE
            kwargs["max_overflow"] = settings.DATABASE_MAX_OVERFLOW
        return cls(settings.DATABASE_URL, **kwargs)

    async def create_all(self) -> None:
        """Create tables (in production, use Alembic migrations)."""
        # Import all models to register them
        from app import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session.

    Commits when the request succeeds and rolls back when it raises.
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
