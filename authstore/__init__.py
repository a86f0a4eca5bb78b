"""SQLAlchemy persistence adapter for auth users, sessions, accounts and tokens."""

from authstore.core.exceptions import (
    AppException,
    MissingUserIdException,
    VerificationTokenException,
)
from authstore.services.auth_adapter import AuthAdapter, create_auth_adapter
from authstore.services.contract import AuthAdapterProtocol

__version__ = "0.1.0"

__all__ = [
    "AppException",
    "AuthAdapter",
    "AuthAdapterProtocol",
    "MissingUserIdException",
    "VerificationTokenException",
    "create_auth_adapter",
]
