"""User model definition using SQLAlchemy Core."""

from uuid import uuid4

from sqlalchemy import Column, DateTime, Table, Text

from authstore.models.metadata import metadata


def generate_user_id() -> str:
    """Generate a random user identifier."""
    return str(uuid4())


users = Table(
    "users",
    metadata,
    Column("id", Text, primary_key=True, default=generate_user_id),
    Column("name", Text),
    Column("email", Text, nullable=False, unique=True, index=True),
    Column("emailVerified", DateTime(timezone=True), key="email_verified"),
    # Avatar URL
    Column("image", Text),
)
