"""Storage contract expected by the auth framework."""

from typing import Protocol, runtime_checkable

from authstore.schemas.accounts import AdapterAccountCreate, ProviderAccountKey
from authstore.schemas.sessions import AdapterSessionCreate, AdapterSessionUpdate
from authstore.schemas.users import AdapterUserCreate, AdapterUserUpdate
from authstore.schemas.verification_tokens import (
    VerificationTokenCreate,
    VerificationTokenKey,
)


@runtime_checkable
class AuthAdapterProtocol(Protocol):
    async def create_user(self, user: AdapterUserCreate) -> dict: ...

    async def get_user(self, user_id: str) -> dict | None: ...

    async def get_user_by_email(self, email: str) -> dict | None: ...

    async def get_user_by_account(self, account: ProviderAccountKey) -> dict | None: ...

    async def update_user(self, user: AdapterUserUpdate) -> dict | None: ...

    async def delete_user(self, user_id: str) -> None: ...

    async def link_account(self, account: AdapterAccountCreate) -> dict: ...

    async def unlink_account(self, account: ProviderAccountKey) -> None: ...

    async def create_session(self, session: AdapterSessionCreate) -> dict: ...

    async def get_session_and_user(self, session_token: str) -> dict | None: ...

    async def update_session(self, session: AdapterSessionUpdate) -> dict | None: ...

    async def delete_session(self, session_token: str) -> None: ...

    async def create_verification_token(self, token: VerificationTokenCreate) -> dict: ...

    async def use_verification_token(self, token: VerificationTokenKey) -> dict | None: ...
