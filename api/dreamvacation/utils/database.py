"""
Database Connection & Session Management
"""
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
import logging

from dreamvacation.config import Settings

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Create the async engine described by the settings"""
    url = settings.SQLALCHEMY_DATABASE_URL
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=settings.DEBUG)

    return create_async_engine(
        url,
        echo=settings.DEBUG,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
        pool_recycle=3600,  # Recycle connections after 1 hour
        pool_timeout=10,  # Wait max 10 seconds for a connection from pool
    )


class Database:
    """
    Owns the engine and session factory for the destinations store.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(create_engine_from_settings(settings))

    async def init_schema(self) -> bool:
        """
        Create the destinations table if it does not exist.

        Failures are logged and reported through the return value; the
        service keeps starting so requests fail with 500 instead.
        """
        # Register models on Base.metadata
        from dreamvacation.models import Destination  # noqa: F401

        logger.info("Initializing database schema...")
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Database initialization error: {e}")
            return False
        logger.info("Database initialized")
        return True

    async def close(self):
        """Dispose of pooled connections"""
        logger.info("Closing database connection...")
        await self.engine.dispose()
        logger.info("Database connection closed")


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """
    Dependency that provides a database session
    Usage: db: AsyncSession = Depends(get_db)
    """
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
