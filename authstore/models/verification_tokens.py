"""Verification token model definition using SQLAlchemy Core."""

from sqlalchemy import Column, DateTime, Table, Text

from authstore.models.metadata import metadata

# Composite primary key (identifier, token)
verification_tokens = Table(
    "verificationToken",
    metadata,
    Column("identifier", Text, primary_key=True),
    Column("token", Text, primary_key=True),
    Column("expires", DateTime(timezone=True), nullable=False),
)
