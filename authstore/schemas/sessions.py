"""Session schemas for adapter input validation."""

from datetime import datetime

from pydantic import BaseModel


class AdapterSessionCreate(BaseModel):
    """Schema for creating a new session."""

    session_token: str
    user_id: str
    expires: datetime


class AdapterSessionUpdate(BaseModel):
    """Schema for updating a session by its token."""

    session_token: str
    user_id: str | None = None
    expires: datetime | None = None
