"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from authstore.database import get_db
from authstore.services.auth_adapter import AuthAdapter, create_auth_adapter

DatabaseSession = Annotated[AsyncSession, Depends(get_db)]


async def get_auth_adapter(db: DatabaseSession) -> AuthAdapter:
    """
    Build an auth adapter on the request's database session.

    Args:
        db: Database session

    Returns:
        Adapter bound to the session
    """
    return create_auth_adapter(db)


AuthAdapterDep = Annotated[AuthAdapter, Depends(get_auth_adapter)]
