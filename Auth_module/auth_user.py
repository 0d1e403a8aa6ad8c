from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from deps import get_db
from Common_module.errors import AuthenticationError
from .Auth_model import User
from . import security

security_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Actor:
    """Verified identity attached to a request."""
    user_id: int
    username: str
    role: Optional[str]


def get_current_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
    db: Session = Depends(get_db)
) -> Actor:
    """
    Validates the bearer token and returns the acting user.
    The role is read from the users table so role changes apply immediately.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Access denied. No token provided.")

    payload = security.decode_access_token(credentials.credentials)

    user_id = payload.get("sub")
    if not user_id:
        raise AuthenticationError("Token does not contain user info")

    try:
        user = db.query(User).filter(User.id == int(user_id)).first()
    except ValueError:
        raise AuthenticationError("Invalid user ID format in token")

    if not user:
        raise AuthenticationError("User not found")

    return Actor(user_id=user.id, username=user.username, role=user.role)
