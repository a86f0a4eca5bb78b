"""Script to initialize the database."""

import asyncio
import sys

import structlog

from authstore.core.logging import configure_logging
from authstore.database import check_database_connection, create_tables, get_engine

logger = structlog.get_logger(__name__)


async def init_db() -> int:
    """Initialize the database by creating the auth tables."""
    engine = get_engine()
    try:
        if not await check_database_connection(engine):
            return 1

        await create_tables(engine)
        print("✓ Database initialized successfully!")
        return 0
    finally:
        await engine.dispose()


if __name__ == "__main__":
    configure_logging()
    sys.exit(asyncio.run(init_db()))
