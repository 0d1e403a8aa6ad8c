from datetime import timedelta
from typing import Dict, Any, Optional
import jwt
import bcrypt

from config import settings
from Common_module.datetime_utils import now_local
from Common_module.errors import AuthenticationError

BCRYPT_ROUNDS = 10


def _secret_key() -> str:
    if not settings.SECRET_KEY:
        raise ValueError("SECRET_KEY is missing in .env file")
    return settings.SECRET_KEY


def create_access_token(data: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """
    Creates a JWT access token with expiration timestamp.
    """
    to_encode = data.copy()
    expire = now_local() + timedelta(
        seconds=(expires_delta or settings.ACCESS_TOKEN_EXPIRE_SECONDS)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, _secret_key(), algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decodes and validates JWT access token.
    Raises AuthenticationError for invalid or expired tokens.
    """
    try:
        return jwt.decode(token, _secret_key(), algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expired")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid token")


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
