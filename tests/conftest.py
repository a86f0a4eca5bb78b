import os
import sys
from collections.abc import AsyncGenerator
from datetime import UTC, datetime, timedelta

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

# Load environment variables from .env file
load_dotenv()

# Settings require a database URL at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from authstore.config import settings
from authstore.database import build_engine
from authstore.models import metadata, users
from authstore.services.auth_adapter import AuthAdapter, create_auth_adapter

# Test database URL - MUST be different from production
# Falls back to a throwaway SQLite file per test when unset
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")

if TEST_DATABASE_URL:
    # Additional safety: ensure we're not using production database
    if settings.database_url == TEST_DATABASE_URL:
        print("\n❌ CRITICAL ERROR: Test database URL is same as production database!")
        print("This would DROP all production data during tests.")
        print("Please set TEST_DATABASE_URL to a separate test database in .env")
        sys.exit(1)

    # Ensure we're using asyncpg driver for async operations
    if TEST_DATABASE_URL.startswith("postgresql://"):
        TEST_DATABASE_URL = TEST_DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://")


@pytest_asyncio.fixture
async def test_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Create a test engine with fresh auth tables."""
    url = TEST_DATABASE_URL or f"sqlite+aiosqlite:///{tmp_path / 'authstore_test.db'}"

    # Use NullPool to avoid event loop issues between tests
    engine = build_engine(url, poolclass=NullPool)

    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
        await conn.run_sync(metadata.create_all)

    yield engine

    # Drop tables after test
    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    TestSessionLocal = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with TestSessionLocal() as session:
        yield session


@pytest.fixture
def adapter(db_session: AsyncSession) -> AuthAdapter:
    """Adapter bound to the test session."""
    return create_auth_adapter(db_session)


@pytest.fixture
def session_expires() -> datetime:
    """Expiry one month out, as the auth framework sets it."""
    return (datetime.now(UTC) + timedelta(days=30)).replace(microsecond=0)


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession) -> dict:
    """Create a test user in the database."""
    user_data = {
        "id": "user-test-1",
        "name": "Test User",
        "email": "test@example.com",
        "email_verified": None,
        "image": "https://example.com/avatar.png",
    }

    await db_session.execute(insert(users).values(**user_data))
    await db_session.commit()

    return user_data
