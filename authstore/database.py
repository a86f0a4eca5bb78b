"""Database configuration and connection management."""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import Any

import structlog
from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from authstore.config import settings
from authstore.models import metadata

logger = structlog.get_logger(__name__)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on foreign key enforcement for every SQLite connection."""

    @event.listens_for(engine.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_conn: Any, connection_record: Any) -> None:
        """Set database connection parameters."""
        # SQLite ignores ON DELETE CASCADE unless this is set per connection
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(database_url: str, **kwargs: Any) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    Args:
        database_url: SQLAlchemy URL with an async driver
        **kwargs: Extra engine options

    Returns:
        Configured async engine
    """
    if database_url.startswith("sqlite"):
        engine = create_async_engine(database_url, echo=settings.debug, **kwargs)
        enable_sqlite_foreign_keys(engine)
        return engine

    options: dict[str, Any] = {
        "echo": settings.debug,
        "pool_pre_ping": True,
    }
    # Sizing only applies to the default queue pool
    if "poolclass" not in kwargs:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=settings.db_pool_recycle,
        )
    if "asyncpg" in database_url:
        options["connect_args"] = {
            "server_settings": {
                "application_name": settings.app_name,
            },
        }
    options.update(kwargs)
    return create_async_engine(database_url, **options)


@lru_cache
def get_engine() -> AsyncEngine:
    """Get the cached application engine."""
    return build_engine(settings.async_database_url)


@lru_cache
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the cached async session factory."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting async database sessions."""
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """Create the auth tables if they do not exist."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("auth_tables_created", tables=sorted(metadata.tables))


async def check_database_connection(engine: AsyncEngine | None = None) -> bool:
    """Check if database connection is healthy."""
    engine = engine or get_engine()
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error("database_connection_failed", error=str(e))
        return False
