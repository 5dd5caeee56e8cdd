"""
StudyPlanner Backend: Authorization Policy
===========================================

What:  The single ownership rule every resource uses.
How:   Callers are described by an `AuthContext` (claimed subject id + role,
       taken from request headers). `evaluate()` compares it with the
       resource owner's id; `authorize()` raises on anything but ALLOWED.

Rule:
    role missing or subject id missing      → UNAUTHORIZED (401)
    role == "admin"                         → ALLOWED
    role == "user" and subject id == owner  → ALLOWED
    anything else                           → FORBIDDEN (403)

The headers are trusted as sent. AuthContext is the only thing handlers see,
so a token-based scheme can replace the header extraction without touching
them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from studyplanner.exceptions import ForbiddenError, UnauthorizedError

FORBIDDEN_MESSAGE = "Forbidden: Insufficient permissions"


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


class Decision(str, Enum):
    ALLOWED = "allowed"
    FORBIDDEN = "forbidden"
    UNAUTHORIZED = "unauthorized"


@dataclass(frozen=True)
class AuthContext:
    """Who the caller claims to be."""

    subject_id: int
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value


def evaluate(role: Optional[str], subject_id: Optional[int], owner_id: int) -> Decision:
    if role is None or subject_id is None:
        return Decision.UNAUTHORIZED
    if role == Role.ADMIN.value:
        return Decision.ALLOWED
    if role == Role.USER.value and subject_id == owner_id:
        return Decision.ALLOWED
    return Decision.FORBIDDEN


def authorize(auth: AuthContext, owner_id: int, message: str = FORBIDDEN_MESSAGE) -> None:
    """Raises ForbiddenError/UnauthorizedError unless `auth` may act on `owner_id`'s data."""
    decision = evaluate(auth.role, auth.subject_id, owner_id)
    if decision is Decision.UNAUTHORIZED:
        raise UnauthorizedError("Unauthorized")
    if decision is Decision.FORBIDDEN:
        raise ForbiddenError(
            message,
            context={"subject_id": auth.subject_id, "role": auth.role, "owner_id": owner_id},
        )


def authorize_owner_only(subject_id: int, owner_id: int, message: str) -> None:
    """
    Same rule with the caller treated as a plain user, so only the owner
    passes and an admin role grants nothing. Used by course deletion.
    """
    authorize(AuthContext(subject_id=subject_id, role=Role.USER.value), owner_id, message)
