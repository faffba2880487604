"""Typed exception hierarchy for preference lifecycle errors."""

from uuid import UUID

# Stable message token returned to clients on a duplicate create.
USER_EXISTS = "UserExists"


class PreferenceError(Exception):
    """Base exception for preference lifecycle errors.

    Carries the user id the failed operation targeted.
    """

    def __init__(self, message: str, user_id: UUID | str | None = None):
        self.user_id = user_id
        super().__init__(message)


class PreferenceExistsError(PreferenceError):
    """An active preference already exists for the user."""

    def __init__(self, user_id: UUID | str | None = None):
        super().__init__(USER_EXISTS, user_id)
