"""User schemas for adapter input validation."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, TypeAdapter, ValidationError

_email_adapter = TypeAdapter(EmailStr)


def normalize_email(email: str) -> str:
    """
    Normalize an email the same way stored user emails are.

    Args:
        email: Raw email address

    Returns:
        Normalized address, or the input unchanged if it is not a valid email
    """
    try:
        return _email_adapter.validate_python(email)
    except ValidationError:
        # Invalid addresses can never have been stored, so the raw value just misses
        return email


class AdapterUserBase(BaseModel):
    """Base user schema with common fields."""

    name: str | None = None
    email: EmailStr
    email_verified: datetime | None = None
    image: str | None = None


class AdapterUserCreate(AdapterUserBase):
    """Schema for creating a new user."""

    id: str | None = Field(None, description="User ID, generated when omitted")


class AdapterUserUpdate(BaseModel):
    """Schema for updating a user. Only explicitly set fields are written."""

    id: str | None = None
    name: str | None = None
    email: EmailStr | None = None
    email_verified: datetime | None = None
    image: str | None = None
