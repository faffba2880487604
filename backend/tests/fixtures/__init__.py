"""Test fixtures and sample data."""
import uuid
from datetime import datetime, timedelta, timezone

import jwt
import pytest
from sqlalchemy.orm import Session

from config import settings
from models import Preference


def make_token(user_id: uuid.UUID, elevated_rights: bool, expired: bool = False, **claims) -> str:
    """Mint a bearer token the API accepts.

    Expired tokens are ten minutes past expiry, well beyond the clock skew
    leeway. Extra keyword claims override the defaults; pass ``None`` to
    drop a claim entirely.
    """
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "jti": str(uuid.uuid4()),
        "userId": str(user_id),
        "ElevatedRights": elevated_rights,
        "iss": settings.TOKEN_ISSUER,
        "aud": settings.TOKEN_AUDIENCE,
        "exp": now - timedelta(minutes=10) if expired else now + timedelta(days=1),
    }
    payload.update(claims)
    payload = {k: v for k, v in payload.items() if v is not None}
    return jwt.encode(payload, settings.TOKEN_KEY, algorithm=settings.TOKEN_ALGORITHM)


def auth_headers(token: str) -> dict[str, str]:
    """Authorization header for a bearer token."""
    return {"Authorization": f"Bearer {token}"}


def create_preference(
    db: Session,
    user_id: uuid.UUID,
    language: str = "GB",
    deleted: bool = False,
) -> Preference:
    """Insert and commit a Preference created by some other actor."""
    actor = str(uuid.uuid4())
    now = datetime.now(timezone.utc)
    pref = Preference(
        user_id=str(user_id),
        preferred_language=language,
        deleted=deleted,
        created_by=actor,
        created_on=now,
        edited_by=actor,
        edited_on=now,
    )
    db.add(pref)
    db.commit()
    db.refresh(pref)
    return pref


@pytest.fixture
def admin_identity():
    """(headers, user_id) for an actor with elevated rights."""
    user_id = uuid.uuid4()
    return auth_headers(make_token(user_id, elevated_rights=True)), user_id


@pytest.fixture
def user_identity():
    """(headers, user_id) for an ordinary actor."""
    user_id = uuid.uuid4()
    return auth_headers(make_token(user_id, elevated_rights=False)), user_id


@pytest.fixture
def expired_identity():
    """(headers, user_id) for an actor whose token has expired."""
    user_id = uuid.uuid4()
    return auth_headers(make_token(user_id, elevated_rights=True, expired=True)), user_id
