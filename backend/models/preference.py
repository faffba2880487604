"""Preference model - one preferred-language record per user."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, text

from database import Base


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class Preference(Base):
    """A user's preferences, soft-deleted rather than removed.

    Only one non-deleted row may exist per ``user_id``. The partial unique
    index enforces that at the database so concurrent creates for the same
    user cannot both commit.
    """

    __tablename__ = "preferences"
    __table_args__ = (
        Index(
            "ix_preferences_active_user_id",
            "user_id",
            unique=True,
            sqlite_where=text("deleted = 0"),
            postgresql_where=text("deleted = false"),
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), index=True, nullable=False)
    preferred_language = Column(String, nullable=False)
    deleted = Column(Boolean, nullable=False, default=False)
    created_by = Column(String(36), nullable=False)
    created_on = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    edited_by = Column(String(36), nullable=False)
    edited_on = Column(DateTime(timezone=True), nullable=False, default=utcnow)
