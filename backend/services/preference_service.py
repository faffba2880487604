"""Preference service - lifecycle decisions for a user's preference record."""

import logging
from uuid import UUID

from models.preference import Preference, utcnow
from services.exceptions import PreferenceExistsError
from services.preference_store import PreferenceStore

logger = logging.getLogger(__name__)


class PreferenceService:
    """Create, read, update and soft-delete a user's preference.

    Callers authorize first and commit afterwards through the store.
    Update and soft-delete operate on a record the caller already looked up.
    """

    @staticmethod
    def get(store: PreferenceStore, user_id: UUID) -> Preference | None:
        """Get the active preference for a user, or None.

        Soft-deleted and never-created preferences are both None.
        """
        return store.find_active(user_id)

    @staticmethod
    def create(
        store: PreferenceStore, user_id: UUID, language: str, actor_id: UUID
    ) -> UUID:
        """Stage a new preference for ``user_id``.

        Returns:
            The user id the preference was created for.

        Raises:
            PreferenceExistsError: the user already has an active preference.
                Nothing is staged in that case.
        """
        if store.find_active(user_id) is not None:
            raise PreferenceExistsError(user_id)

        now = utcnow()
        store.save(
            Preference(
                user_id=str(user_id),
                preferred_language=language,
                deleted=False,
                created_by=str(actor_id),
                created_on=now,
                edited_by=str(actor_id),
                edited_on=now,
            )
        )
        logger.info("Created preference for user %s (by %s)", user_id, actor_id)
        return user_id

    @staticmethod
    def update(
        store: PreferenceStore, preference: Preference, language: str, actor_id: UUID
    ) -> None:
        """Change the preferred language of an active preference."""
        preference.preferred_language = language
        preference.edited_by = str(actor_id)
        preference.edited_on = utcnow()
        store.save(preference)
        logger.info("Updated preference for user %s (by %s)", preference.user_id, actor_id)

    @staticmethod
    def soft_delete(
        store: PreferenceStore, preference: Preference | None, actor_id: UUID
    ) -> None:
        """Mark a preference deleted. A missing preference is a no-op."""
        if preference is None:
            return
        preference.deleted = True
        preference.edited_by = str(actor_id)
        preference.edited_on = utcnow()
        store.save(preference)
        logger.info("Deleted preference for user %s (by %s)", preference.user_id, actor_id)
