"""SQLAlchemy Core adapter for the auth framework storage contract."""

from typing import Any

import structlog
from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.engine import RowMapping
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from authstore.core.exceptions import MissingUserIdException, VerificationTokenException
from authstore.models.accounts import accounts
from authstore.models.sessions import sessions
from authstore.models.users import users
from authstore.models.verification_tokens import verification_tokens
from authstore.schemas.accounts import AdapterAccountCreate, ProviderAccountKey
from authstore.schemas.sessions import AdapterSessionCreate, AdapterSessionUpdate
from authstore.schemas.users import AdapterUserCreate, AdapterUserUpdate, normalize_email
from authstore.schemas.verification_tokens import (
    VerificationTokenCreate,
    VerificationTokenKey,
)

logger = structlog.get_logger(__name__)

# Account fields left out of link_account results when the provider sent none
OPTIONAL_ACCOUNT_FIELDS = (
    "access_token",
    "token_type",
    "id_token",
    "refresh_token",
    "scope",
    "expires_at",
    "session_state",
)


def _table_row(table: Table, row: RowMapping) -> dict[str, Any]:
    """Key one table's columns of a row by their Python keys."""
    return {column.key: row[column] for column in table.c}


class AuthAdapter:
    """
    Auth storage adapter backed by SQLAlchemy Core tables.

    Each method runs a single statement on the bound session and returns
    plain dicts keyed by snake_case column keys. Writes are committed immediately.
    """

    def __init__(self, db: AsyncSession):
        """Initialize adapter with a database session."""
        self.db = db

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def create_user(self, user: AdapterUserCreate) -> dict:
        """Create a new user."""
        query = insert(users).values(**user.model_dump(exclude_none=True)).returning(users)

        result = await self.db.execute(query)
        created = _table_row(users, result.mappings().one())
        await self.db.commit()

        logger.info("user_created", user_id=created["id"])
        return created

    async def get_user(self, user_id: str) -> dict | None:
        """Get user by ID."""
        query = select(users).where(users.c.id == user_id)
        result = await self.db.execute(query)
        user = result.mappings().first()
        return _table_row(users, user) if user else None

    async def get_user_by_email(self, email: str) -> dict | None:
        """Get user by email, normalized the way it was stored."""
        query = select(users).where(users.c.email == normalize_email(email))
        result = await self.db.execute(query)
        user = result.mappings().first()
        return _table_row(users, user) if user else None

    async def get_user_by_account(self, account: ProviderAccountKey) -> dict | None:
        """Get the user linked to a provider account."""
        query = (
            select(users)
            .join(accounts, accounts.c.user_id == users.c.id)
            .where(
                accounts.c.provider == account.provider,
                accounts.c.provider_account_id == account.provider_account_id,
            )
        )
        result = await self.db.execute(query)
        user = result.mappings().first()
        return _table_row(users, user) if user else None

    async def update_user(self, user: AdapterUserUpdate) -> dict | None:
        """
        Update a user profile.

        Args:
            user: User fields to write; only explicitly set fields are used

        Returns:
            Updated user, or None if no user has that ID

        Raises:
            MissingUserIdException: If the update carries no user ID
        """
        if not user.id:
            raise MissingUserIdException()

        update_data = user.model_dump(exclude_unset=True, exclude={"id"})
        if not update_data:
            return await self.get_user(user.id)

        query = update(users).where(users.c.id == user.id).values(**update_data).returning(users)

        result = await self.db.execute(query)
        updated = result.mappings().first()
        await self.db.commit()

        if not updated:
            return None

        logger.info("user_updated", user_id=user.id, fields=sorted(update_data))
        return _table_row(users, updated)

    async def delete_user(self, user_id: str) -> None:
        """Delete a user together with its accounts and sessions."""
        query = delete(users).where(users.c.id == user_id)
        await self.db.execute(query)
        await self.db.commit()
        logger.info("user_deleted", user_id=user_id)

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------

    async def link_account(self, account: AdapterAccountCreate) -> dict:
        """
        Link a provider account to a user.

        Args:
            account: Provider account with its OAuth tokens

        Returns:
            Stored account; optional token fields that are NULL are omitted
        """
        query = insert(accounts).values(**account.model_dump()).returning(accounts)

        result = await self.db.execute(query)
        linked = _table_row(accounts, result.mappings().one())
        await self.db.commit()

        logger.info(
            "account_linked",
            user_id=linked["user_id"],
            provider=linked["provider"],
        )

        for field in OPTIONAL_ACCOUNT_FIELDS:
            if linked.get(field) is None:
                linked.pop(field, None)
        return linked

    async def unlink_account(self, account: ProviderAccountKey) -> None:
        """Remove a provider account link."""
        query = delete(accounts).where(
            accounts.c.provider_account_id == account.provider_account_id,
            accounts.c.provider == account.provider,
        )
        await self.db.execute(query)
        await self.db.commit()
        logger.info("account_unlinked", provider=account.provider)

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    async def create_session(self, session: AdapterSessionCreate) -> dict:
        """Create a new session."""
        query = insert(sessions).values(**session.model_dump()).returning(sessions)

        result = await self.db.execute(query)
        created = _table_row(sessions, result.mappings().one())
        await self.db.commit()

        logger.info("session_created", user_id=created["user_id"])
        return created

    async def get_session_and_user(self, session_token: str) -> dict | None:
        """
        Get a session together with the user it belongs to.

        Args:
            session_token: Session token

        Returns:
            Dict with "session" and "user" entries, or None if not found
        """
        query = (
            select(sessions, users)
            .join(users, users.c.id == sessions.c.user_id)
            .where(sessions.c.session_token == session_token)
        )
        result = await self.db.execute(query)
        row = result.mappings().first()

        if not row:
            return None

        return {
            "session": _table_row(sessions, row),
            "user": _table_row(users, row),
        }

    async def update_session(self, session: AdapterSessionUpdate) -> dict | None:
        """Update a session by token."""
        update_data = session.model_dump(exclude_unset=True, exclude={"session_token"})
        if not update_data:
            query = select(sessions).where(sessions.c.session_token == session.session_token)
            result = await self.db.execute(query)
            current = result.mappings().first()
            return _table_row(sessions, current) if current else None

        query = (
            update(sessions)
            .where(sessions.c.session_token == session.session_token)
            .values(**update_data)
            .returning(sessions)
        )

        result = await self.db.execute(query)
        updated = result.mappings().first()
        await self.db.commit()

        return _table_row(sessions, updated) if updated else None

    async def delete_session(self, session_token: str) -> None:
        """Delete a session by token."""
        query = delete(sessions).where(sessions.c.session_token == session_token)
        await self.db.execute(query)
        await self.db.commit()
        logger.info("session_deleted")

    # ------------------------------------------------------------------
    # Verification tokens
    # ------------------------------------------------------------------

    async def create_verification_token(self, token: VerificationTokenCreate) -> dict:
        """Store a new email verification token."""
        query = insert(verification_tokens).values(**token.model_dump()).returning(verification_tokens)

        result = await self.db.execute(query)
        created = _table_row(verification_tokens, result.mappings().one())
        await self.db.commit()

        logger.info("verification_token_created")
        return created

    async def use_verification_token(self, token: VerificationTokenKey) -> dict | None:
        """
        Consume a verification token.

        The token row is deleted, so a second call with the same key
        returns None.

        Args:
            token: Identifier and token value

        Returns:
            The consumed token, or None if it does not exist

        Raises:
            VerificationTokenException: If the lookup or deletion fails
        """
        query = (
            delete(verification_tokens)
            .where(
                verification_tokens.c.identifier == token.identifier,
                verification_tokens.c.token == token.token,
            )
            .returning(verification_tokens)
        )

        try:
            result = await self.db.execute(query)
            used = result.mappings().first()
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            # Driver messages embed bound parameters, which include the identifier
            logger.error("verification_token_use_failed", error=e.__class__.__name__)
            raise VerificationTokenException() from e

        if not used:
            return None

        logger.info("verification_token_used")
        return _table_row(verification_tokens, used)


def create_auth_adapter(db: AsyncSession) -> AuthAdapter:
    """Create an auth adapter bound to a database session."""
    return AuthAdapter(db)
