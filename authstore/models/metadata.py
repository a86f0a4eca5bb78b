"""Shared metadata for the auth tables."""

from sqlalchemy import MetaData

# Accounts and sessions reference users.id, so all tables share one registry
metadata = MetaData()
