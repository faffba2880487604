"""Preference store - single-table data access over a SQLAlchemy session."""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.preference import Preference
from services.exceptions import PreferenceExistsError

logger = logging.getLogger(__name__)

ACTIVE_USER_INDEX = "ix_preferences_active_user_id"

# PostgreSQL SQLSTATE for unique_violation.
_PG_UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """Return True if ``exc`` is a UNIQUE constraint failure.

    SQLite only reports it in the message. PostgreSQL drivers expose the
    SQLSTATE as ``pgcode`` (psycopg2) or ``sqlstate`` (psycopg 3).
    """
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code is not None:
        return code == _PG_UNIQUE_VIOLATION
    message = str(orig)
    return "UNIQUE constraint failed" in message or ACTIVE_USER_INDEX in message


class PreferenceStore:
    """Lookup and persistence for Preference rows within one unit of work.

    The store holds no business rules. The one-active-record-per-user rule
    is checked by PreferenceService and backed by a partial unique index,
    which is why ``commit()`` can report a duplicate.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_active(self, user_id: UUID, include_deleted: bool = False) -> Preference | None:
        """Return the non-deleted record for ``user_id``, or None.

        With ``include_deleted=True`` the most recently inserted
        soft-deleted record is returned instead of the active one.
        """
        return (
            self.db.query(Preference)
            .filter(
                Preference.user_id == str(user_id),
                Preference.deleted == include_deleted,
            )
            .order_by(Preference.id.desc())
            .first()
        )

    def save(self, preference: Preference) -> Preference:
        """Track a new or modified record in the current unit of work."""
        self.db.add(preference)
        return preference

    def commit(self) -> None:
        """Apply pending saves atomically. The session is rolled back on failure.

        Raises:
            PreferenceExistsError: a concurrent writer already committed an
                active preference for the same user.
            IntegrityError: any other constraint failure.
        """
        pending_user_ids = [p.user_id for p in self.db.new if isinstance(p, Preference)]
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if not is_unique_violation(exc):
                raise
            logger.warning("Duplicate active preference rejected on commit: %s", pending_user_ids)
            raise PreferenceExistsError(pending_user_ids[0] if pending_user_ids else None) from exc
