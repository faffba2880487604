"""FastAPI dependencies - bearer credential verification and store wiring."""

import logging
from uuid import UUID

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from config import settings
from database import get_db
from services.authorization import (
    AuthorizationContext,
    Decision,
    IdentityError,
    Operation,
    authorize,
    extract_identity,
)
from services.preference_store import PreferenceStore

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


def decode_token(token: str) -> dict:
    """Verify a bearer token and return its claims.

    Raises:
        jwt.InvalidTokenError: bad signature, issuer, audience, or expired.
    """
    return jwt.decode(
        token,
        settings.TOKEN_KEY,
        algorithms=[settings.TOKEN_ALGORITHM],
        audience=settings.TOKEN_AUDIENCE,
        issuer=settings.TOKEN_ISSUER,
        leeway=settings.TOKEN_CLOCK_SKEW_SECONDS,
        options={"require": ["exp"]},
    )


def get_authorization_context(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AuthorizationContext:
    """Resolve the caller's identity from the Authorization header, or 401."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers=_UNAUTHORIZED_HEADERS,
        )

    try:
        claims = decode_token(credentials.credentials)
    except jwt.InvalidTokenError as exc:
        logger.warning("Rejected bearer token: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers=_UNAUTHORIZED_HEADERS,
        ) from exc

    identity = extract_identity(claims)
    if isinstance(identity, IdentityError):
        logger.warning("Rejected token identity: %s", identity.reason)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid identity",
            headers=_UNAUTHORIZED_HEADERS,
        )
    return identity


def ensure_permitted(
    context: AuthorizationContext, target_user_id: UUID | None, operation: Operation
) -> None:
    """Raise 403 unless ``context`` may perform ``operation`` on the target."""
    if authorize(context, target_user_id, operation) is Decision.DENIED:
        logger.info(
            "Denied %s on user %s for actor %s",
            operation.value,
            target_user_id,
            context.actor_id,
        )
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")


def require_unscoped_permission(operation: Operation):
    """Build a dependency authorizing an operation whose rule ignores the target user.

    Create and delete need elevated rights whoever the target is, so they
    are checked here, before the path or body is validated.
    """

    def dependency(
        context: AuthorizationContext = Depends(get_authorization_context),
    ) -> AuthorizationContext:
        ensure_permitted(context, None, operation)
        return context

    return dependency


def get_preference_store(db: Session = Depends(get_db)) -> PreferenceStore:
    """Provide a PreferenceStore bound to the request's session."""
    return PreferenceStore(db)
