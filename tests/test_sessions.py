"""Tests for session adapter operations."""

from datetime import datetime, timedelta

import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError

from authstore.schemas.sessions import AdapterSessionCreate, AdapterSessionUpdate
from authstore.services.auth_adapter import AuthAdapter


@pytest_asyncio.fixture
async def test_session(adapter: AuthAdapter, test_user: dict, session_expires: datetime) -> dict:
    """Create a session for the test user."""
    return await adapter.create_session(
        AdapterSessionCreate(
            session_token="session-token-1",
            user_id=test_user["id"],
            expires=session_expires,
        )
    )


@pytest.mark.asyncio
async def test_create_session(test_session: dict, test_user: dict, session_expires: datetime) -> None:
    """Test that creating a session returns the stored row."""
    assert test_session["session_token"] == "session-token-1"
    assert test_session["user_id"] == test_user["id"]
    assert test_session["expires"].replace(tzinfo=None) == session_expires.replace(tzinfo=None)


@pytest.mark.asyncio
async def test_create_session_for_unknown_user(
    adapter: AuthAdapter, session_expires: datetime
) -> None:
    """Test that a session must reference an existing user."""
    with pytest.raises(IntegrityError):
        await adapter.create_session(
            AdapterSessionCreate(
                session_token="orphan",
                user_id="missing",
                expires=session_expires,
            )
        )

    await adapter.db.rollback()


@pytest.mark.asyncio
async def test_get_session_and_user(
    adapter: AuthAdapter, test_session: dict, test_user: dict
) -> None:
    """Test that a session is returned together with its user."""
    result = await adapter.get_session_and_user(test_session["session_token"])

    assert result is not None
    assert set(result) == {"session", "user"}
    assert result["session"]["session_token"] == test_session["session_token"]
    assert result["session"]["user_id"] == test_user["id"]
    assert result["user"] == test_user


@pytest.mark.asyncio
async def test_get_session_and_user_not_found(adapter: AuthAdapter) -> None:
    """Test that an unknown token returns None."""
    assert await adapter.get_session_and_user("missing") is None


@pytest.mark.asyncio
async def test_update_session_expiry(
    adapter: AuthAdapter, test_session: dict, session_expires: datetime
) -> None:
    """Test extending a session."""
    extended = session_expires + timedelta(days=7)

    updated = await adapter.update_session(
        AdapterSessionUpdate(session_token=test_session["session_token"], expires=extended)
    )

    assert updated is not None
    assert updated["expires"].replace(tzinfo=None) == extended.replace(tzinfo=None)
    assert updated["user_id"] == test_session["user_id"]


@pytest.mark.asyncio
async def test_update_session_without_changes(adapter: AuthAdapter, test_session: dict) -> None:
    """Test that an update with nothing to set returns the stored session."""
    current = await adapter.update_session(
        AdapterSessionUpdate(session_token=test_session["session_token"])
    )

    assert current == test_session


@pytest.mark.asyncio
async def test_update_unknown_session_returns_none(
    adapter: AuthAdapter, session_expires: datetime
) -> None:
    """Test that updating a missing session returns None."""
    updated = await adapter.update_session(
        AdapterSessionUpdate(session_token="missing", expires=session_expires)
    )

    assert updated is None


@pytest.mark.asyncio
async def test_delete_session(adapter: AuthAdapter, test_session: dict) -> None:
    """Test that a deleted session is gone."""
    assert await adapter.delete_session(test_session["session_token"]) is None
    assert await adapter.get_session_and_user(test_session["session_token"]) is None


@pytest.mark.asyncio
async def test_delete_unknown_session(adapter: AuthAdapter) -> None:
    """Test that deleting a missing session is a no-op."""
    assert await adapter.delete_session("missing") is None
