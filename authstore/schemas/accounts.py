"""Account schemas for adapter input validation."""

from pydantic import BaseModel, Field


class ProviderAccountKey(BaseModel):
    """Composite key identifying an account at a provider."""

    provider: str
    provider_account_id: str


class AdapterAccountCreate(ProviderAccountKey):
    """Schema for linking a provider account to a user."""

    user_id: str
    type: str = Field(..., description="Account type (oauth, oidc, email)")
    refresh_token: str | None = None
    access_token: str | None = None
    expires_at: int | None = Field(None, description="Access token expiry, epoch seconds")
    token_type: str | None = None
    scope: str | None = None
    id_token: str | None = None
    session_state: str | None = None
