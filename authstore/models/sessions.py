"""Session model definition using SQLAlchemy Core."""

from sqlalchemy import Column, DateTime, ForeignKey, Table, Text

from authstore.models.metadata import metadata

sessions = Table(
    "sessions",
    metadata,
    Column("sessionToken", Text, primary_key=True, key="session_token"),
    Column(
        "userId",
        Text,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        key="user_id",
    ),
    Column("expires", DateTime(timezone=True), nullable=False),
)
