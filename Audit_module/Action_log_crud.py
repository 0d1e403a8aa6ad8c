import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from Auth_module.Auth_model import User
from .Action_log_model import ActionLog

logger = logging.getLogger(__name__)


def record_action(
    db: Session,
    user_id: Optional[int],
    action: str,
    details: Optional[Dict[str, Any]] = None
) -> None:
    """
    Stage an action log entry in the caller's transaction.

    The insert runs inside a SAVEPOINT so a failed write only undoes itself:
    the business change it documents still commits. Failures are reported to
    the application log and never raised to the caller. Call it last, with
    the final values of the transition.
    """
    try:
        with db.begin_nested():
            db.add(ActionLog(user_id=user_id, action=action, details=details))
    except Exception as e:
        logger.error(f"Error logging action '{action}' for user {user_id}: {e}", exc_info=True)


def get_recent_actions(db: Session, limit: int = 100) -> List[Tuple[ActionLog, Optional[str]]]:
    """Latest log entries with the acting username, newest first."""
    return (
        db.query(ActionLog, User.username)
        .outerjoin(User, ActionLog.user_id == User.id)
        .order_by(ActionLog.timestamp.desc(), ActionLog.id.desc())
        .limit(limit)
        .all()
    )
