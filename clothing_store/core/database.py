"""Database connection and session management."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from clothing_store.core.config import get_async_database_url
from clothing_store.core.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """SQLAlchemy declarative base class."""

    pass


class Database:
    """Owns the engine and session factory for the customer store.

    One instance is created at application startup, handed to the
    repository, and closed on shutdown so pending writes reach the file.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = get_async_database_url(url)
        self.engine = create_async_engine(self.url, echo=echo)
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session that commits on success and rolls back on error."""
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_tables(self) -> None:
        """Create the customers and orders tables if they don't exist."""
        # Register models on Base.metadata
        import clothing_store.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("database_tables_ready", url=self.url)

    async def ping(self) -> bool:
        """Return True if the store answers a trivial query."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as exc:
            logger.warning("database_ping_failed", error=str(exc))
            return False
        return True

    async def close(self) -> None:
        """Dispose of pooled connections, closing the database file."""
        await self.engine.dispose()
        logger.info("database_closed")
