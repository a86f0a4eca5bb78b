"""Database models."""

from authstore.models.accounts import accounts
from authstore.models.metadata import metadata
from authstore.models.sessions import sessions
from authstore.models.users import users
from authstore.models.verification_tokens import verification_tokens

__all__ = [
    "accounts",
    "metadata",
    "sessions",
    "users",
    "verification_tokens",
]
