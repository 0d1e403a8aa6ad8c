"""
Role based permission evaluation.

Every protected route declares the action it needs through
``require_permission``; the check runs as a dependency, before the handler
touches the database.
"""
import logging
from typing import Dict, FrozenSet, NamedTuple, Optional

from fastapi import Depends

from Common_module.errors import PermissionDeniedError
from .auth_user import Actor, get_current_actor

logger = logging.getLogger(__name__)

VIEW = "view"
ADD = "add"
UPDATE = "update"
ARCHIVE = "archive"
ADMIN = "admin"

ROLE_PERMISSIONS: Dict[str, FrozenSet[str]] = {
    "admin": frozenset({VIEW, ADD, UPDATE, ARCHIVE, ADMIN}),
    "pastor": frozenset({VIEW, ADD, UPDATE, ARCHIVE, ADMIN}),
    "secretary": frozenset({VIEW, ADD, UPDATE, ARCHIVE}),
    "board_member": frozenset({VIEW}),
    "user": frozenset({VIEW}),
}

DEFAULT_ROLE = "user"
DENIAL_REASON = "Insufficient permissions"


class PermissionDecision(NamedTuple):
    allowed: bool
    reason: Optional[str] = None


def permissions_for(role: Optional[str]) -> FrozenSet[str]:
    """Permission set for a role; unknown roles get nothing."""
    return ROLE_PERMISSIONS.get(role or DEFAULT_ROLE, frozenset())


def evaluate(role: Optional[str], action: str) -> PermissionDecision:
    # Unknown and insufficient roles get the same answer
    if action in permissions_for(role):
        return PermissionDecision(True)
    return PermissionDecision(False, DENIAL_REASON)


def require_permission(action: str):
    """Build a dependency that returns the actor if their role allows ``action``."""

    def _check(actor: Actor = Depends(get_current_actor)) -> Actor:
        decision = evaluate(actor.role, action)
        if not decision.allowed:
            logger.info(f"Permission denied: role={actor.role} action={action} user_id={actor.user_id}")
            raise PermissionDeniedError(decision.reason)
        return actor

    return _check
