"""Verification token schemas for adapter input validation."""

from datetime import datetime

from pydantic import BaseModel


class VerificationTokenKey(BaseModel):
    """Composite key identifying a verification token."""

    identifier: str
    token: str


class VerificationTokenCreate(VerificationTokenKey):
    """Schema for creating a verification token."""

    expires: datetime
