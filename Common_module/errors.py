"""
Application error taxonomy.
Each error carries the HTTP status it maps to and a short public message;
main.py turns them into JSON responses.
"""
from typing import Any, Dict, Optional

from fastapi import status


class ParishError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, extra: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.extra = extra or {}
        super().__init__(self.message)


class RecordValidationError(ParishError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class InvalidStatusError(RecordValidationError):
    pass


class UnsupportedKindError(RecordValidationError):
    default_message = "Only member records can be restored"


class InvalidSnapshotError(RecordValidationError):
    default_message = "Invalid archive data"


class AuthenticationError(ParishError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid token"


class PermissionDeniedError(ParishError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Insufficient permissions"


class RecordNotFoundError(ParishError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Record not found"


class ConflictError(ParishError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Record already exists"


class StorageFault(ParishError):
    """Transaction or connection failure. The message never carries driver details."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"
