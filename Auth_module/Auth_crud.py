import logging
from typing import Optional

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from Common_module.errors import RecordValidationError, AuthenticationError
from .Auth_model import User
from . import security

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def register_user(db: Session, username: str, password: str) -> User:
    """
    Create a new account with the default 'user' role.
    Roles are raised by an administrator afterwards.
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        raise RecordValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")

    if get_user_by_username(db, username):
        raise RecordValidationError("Username already exists")

    user = User(username=username, password=security.hash_password(password), role="user")
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise RecordValidationError("Username already exists")
    db.refresh(user)

    logger.info(f"User registered: {user.username}")
    return user


def authenticate_user(db: Session, username: str, password: str) -> User:
    user = get_user_by_username(db, username)
    if not user or not security.verify_password(password, user.password):
        raise AuthenticationError("Invalid username or password")
    return user


def issue_token(user: User) -> str:
    return security.create_access_token({
        "sub": str(user.id),
        "username": user.username,
        "role": user.role,
    })
