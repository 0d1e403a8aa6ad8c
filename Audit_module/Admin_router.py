"""
Admin endpoints: accounts, action log, role catalogue.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from deps import get_db
from Auth_module.Auth_model import User, Role
from Auth_module.auth_user import Actor
from Auth_module.permissions import ADMIN, require_permission, permissions_for
from Common_module.datetime_utils import to_local_isoformat
from .Action_log_crud import get_recent_actions

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.get("/users")
def list_users(
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(ADMIN))
):
    users = db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()
    return {
        "status": "success",
        "count": len(users),
        "data": [
            {
                "id": user.id,
                "username": user.username,
                "role": user.role,
                "created_at": to_local_isoformat(user.created_at)
            }
            for user in users
        ]
    }


@router.get("/action_logs")
def list_action_logs(
    limit: int = Query(100, ge=1, le=1000, description="Limit results"),
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(ADMIN))
):
    rows = get_recent_actions(db, limit=limit)
    return {
        "status": "success",
        "count": len(rows),
        "data": [
            {
                "id": log.id,
                "user_id": log.user_id,
                "username": username,
                "action": log.action,
                "details": log.details,
                "timestamp": to_local_isoformat(log.timestamp)
            }
            for log, username in rows
        ]
    }


@router.get("/roles")
def list_roles(
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(ADMIN))
):
    roles = db.query(Role).order_by(Role.role_name).all()
    return {
        "status": "success",
        "count": len(roles),
        "data": [
            {
                "role_name": role.role_name,
                "description": role.description,
                "permissions": sorted(permissions_for(role.role_name))
            }
            for role in roles
        ]
    }
