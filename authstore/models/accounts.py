"""OAuth account link model definition using SQLAlchemy Core."""

from sqlalchemy import (
    Column,
    ForeignKey,
    Integer,
    Table,
    Text,
)

from authstore.models.metadata import metadata

accounts = Table(
    "accounts",
    metadata,
    Column(
        "userId",
        Text,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        key="user_id",
    ),
    # oauth, oidc, email, ...
    Column("type", Text, nullable=False),
    # Composite primary key (provider, providerAccountId)
    Column("provider", Text, primary_key=True),
    Column("providerAccountId", Text, primary_key=True, key="provider_account_id"),
    # Provider tokens
    Column("refresh_token", Text),
    Column("access_token", Text),
    Column("expires_at", Integer),
    Column("token_type", Text),
    Column("scope", Text),
    Column("id_token", Text),
    Column("session_state", Text),
)
