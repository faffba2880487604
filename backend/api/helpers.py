"""Shared API helpers for route handlers."""

from uuid import UUID

from models.preference import Preference
from schemas.preference import PreferencesModel


def to_preferences_model(preference: Preference | None) -> PreferencesModel | None:
    """Project a stored Preference onto the API shape.

    Args:
        preference: A Preference record, or None.

    Returns:
        The matching PreferencesModel, or None when no record was given.
    """
    if preference is None:
        return None
    return PreferencesModel(
        user_id=UUID(preference.user_id),
        language=preference.preferred_language,
    )
