"""Request authorization - identity extraction and permission decisions.

Callers hand over an already verified claim set. Nothing here raises:
extracting an identity yields either an ``AuthorizationContext`` or an
``IdentityError``, and ``authorize`` yields a ``Decision``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping
from uuid import UUID

USER_ID_CLAIM = "userId"
ELEVATED_RIGHTS_CLAIM = "ElevatedRights"


class Operation(str, Enum):
    """Preference operations subject to authorization."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class Decision(str, Enum):
    """Outcome of an authorization check."""

    ALLOWED = "allowed"
    DENIED = "denied"


# Operations an actor may perform on their own preference without elevated rights.
_SELF_SERVICE_OPERATIONS = frozenset({Operation.READ, Operation.UPDATE})


@dataclass(frozen=True)
class AuthorizationContext:
    """Identity of the authenticated caller."""

    actor_id: UUID
    elevated_rights: bool


@dataclass(frozen=True)
class IdentityError:
    """The claim set does not carry a usable identity."""

    reason: str


def _parse_bool_claim(value: Any) -> bool | None:
    """Parse a boolean claim sent either as a JSON bool or a "true"/"false" string."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    return None


def extract_identity(claims: Mapping[str, Any]) -> AuthorizationContext | IdentityError:
    """Build an AuthorizationContext from decoded token claims.

    Returns an IdentityError when a required claim is missing or malformed.
    """
    raw_user_id = claims.get(USER_ID_CLAIM)
    if raw_user_id is None:
        return IdentityError(f"missing '{USER_ID_CLAIM}' claim")
    try:
        actor_id = UUID(str(raw_user_id))
    except ValueError:
        return IdentityError(f"'{USER_ID_CLAIM}' claim is not a UUID")

    if ELEVATED_RIGHTS_CLAIM not in claims:
        return IdentityError(f"missing '{ELEVATED_RIGHTS_CLAIM}' claim")
    elevated_rights = _parse_bool_claim(claims[ELEVATED_RIGHTS_CLAIM])
    if elevated_rights is None:
        return IdentityError(f"'{ELEVATED_RIGHTS_CLAIM}' claim is not a boolean")

    return AuthorizationContext(actor_id=actor_id, elevated_rights=elevated_rights)


def authorize(
    context: AuthorizationContext,
    target_user_id: UUID | None,
    operation: Operation,
) -> Decision:
    """Decide whether ``context`` may perform ``operation`` on ``target_user_id``.

    Elevated actors may do anything to anyone. Everyone else may only read
    or update their own preference; create and delete are never allowed.
    """
    if context.elevated_rights:
        return Decision.ALLOWED
    if operation in _SELF_SERVICE_OPERATIONS and target_user_id == context.actor_id:
        return Decision.ALLOWED
    return Decision.DENIED
