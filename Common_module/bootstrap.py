import logging
from typing import Optional

from sqlalchemy.orm import Session

from database import SessionLocal
from Auth_module.Auth_model import Role
from .Sequence_counter_model import SequenceCounter, MEMBER_SEQUENCE, ARCHIVE_SEQUENCE

logger = logging.getLogger(__name__)

DEFAULT_ROLES = {
    "admin": "Full access including user administration",
    "pastor": "Full access including user administration",
    "secretary": "Maintains the registers; can archive and restore",
    "board_member": "Read-only access",
    "user": "Read-only access",
}


def seed_reference_data(db: Optional[Session] = None) -> None:
    """
    Ensure the role catalogue and sequence counter rows exist.
    Safe to run on every startup.
    """
    session = db or SessionLocal()
    try:
        existing_roles = {name for (name,) in session.query(Role.role_name).all()}
        for role_name, description in DEFAULT_ROLES.items():
            if role_name not in existing_roles:
                session.add(Role(role_name=role_name, description=description))

        existing_counters = {name for (name,) in session.query(SequenceCounter.name).all()}
        for name in (MEMBER_SEQUENCE, ARCHIVE_SEQUENCE):
            if name not in existing_counters:
                session.add(SequenceCounter(name=name, last_value=0))

        session.commit()
    finally:
        if db is None:
            session.close()
