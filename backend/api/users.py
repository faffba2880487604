"""User preference API endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response

from api.dependencies import (
    ensure_permitted,
    get_authorization_context,
    get_preference_store,
    require_unscoped_permission,
)
from api.helpers import to_preferences_model
from schemas.preference import PreferencesModel, PutPreferencesModel
from services.authorization import AuthorizationContext, Operation
from services.exceptions import USER_EXISTS, PreferenceExistsError
from services.preference_service import PreferenceService
from services.preference_store import PreferenceStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/user", tags=["user"])


@router.post("", response_model=UUID)
def create_user_preferences(
    body: PreferencesModel,
    context: AuthorizationContext = Depends(require_unscoped_permission(Operation.CREATE)),
    store: PreferenceStore = Depends(get_preference_store),
):
    """Create a user's preference. Requires elevated rights."""
    try:
        user_id = PreferenceService.create(store, body.user_id, body.language, context.actor_id)
        store.commit()
    except PreferenceExistsError:
        logger.info("Create rejected, preference exists for user %s", body.user_id)
        raise HTTPException(status_code=400, detail=USER_EXISTS)
    return user_id


@router.get("/{user_id}", response_model=PreferencesModel)
def get_user_preferences(
    user_id: UUID,
    context: AuthorizationContext = Depends(get_authorization_context),
    store: PreferenceStore = Depends(get_preference_store),
):
    """Get a user's preference. Own preference, or any with elevated rights."""
    ensure_permitted(context, user_id, Operation.READ)
    preference = to_preferences_model(PreferenceService.get(store, user_id))
    if preference is None:
        raise HTTPException(status_code=404, detail="Preference not found")
    return preference


@router.put("/{user_id}")
def update_user_preferences(
    user_id: UUID,
    body: PutPreferencesModel,
    context: AuthorizationContext = Depends(get_authorization_context),
    store: PreferenceStore = Depends(get_preference_store),
):
    """Change a user's preferred language. Own preference, or any with elevated rights."""
    ensure_permitted(context, user_id, Operation.UPDATE)
    preference = PreferenceService.get(store, user_id)
    if preference is None:
        raise HTTPException(status_code=404, detail="Preference not found")
    PreferenceService.update(store, preference, body.language, context.actor_id)
    store.commit()
    return Response(status_code=200)


@router.delete("/{user_id}")
def delete_user_preferences(
    user_id: UUID,
    context: AuthorizationContext = Depends(require_unscoped_permission(Operation.DELETE)),
    store: PreferenceStore = Depends(get_preference_store),
):
    """Soft-delete a user's preference. Requires elevated rights.

    Deleting a missing or already deleted preference succeeds.
    """
    PreferenceService.soft_delete(store, PreferenceService.get(store, user_id), context.actor_id)
    store.commit()
    return Response(status_code=200)
