"""
Member register numbering ("palo").

Active members are numbered 1..N with no gaps. New members take N + 1 and
removing a member shifts everyone above them down by one. Both operations
must run after ``lock_member_sequence`` in the same transaction as the
insert or delete they serve.
"""
import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from Common_module.Sequence_counter_model import MEMBER_SEQUENCE, lock_counter
from .Member_model import Member

logger = logging.getLogger(__name__)


def lock_member_sequence(db: Session) -> None:
    lock_counter(db, MEMBER_SEQUENCE)


def allocate_next(db: Session) -> int:
    """Next free register number: highest positive palo + 1, or 1 for an empty register."""
    current_max = db.query(func.max(Member.palo)).filter(Member.palo > 0).scalar()
    return (current_max or 0) + 1


def compact_after_removal(db: Session, removed_palo: int) -> int:
    """
    Close the gap left by ``removed_palo``. Returns how many members moved.

    Runs as two bulk updates so the unique index on palo never sees two rows
    with the same value, whatever order the database visits them in: first
    every shifted row moves to the negated target, then the signs flip back.
    """
    shifted = (
        db.query(Member)
        .filter(Member.palo > removed_palo)
        .update({Member.palo: -(Member.palo - 1)}, synchronize_session="fetch")
    )
    if shifted:
        db.query(Member).filter(Member.palo < 0).update(
            {Member.palo: -Member.palo}, synchronize_session="fetch"
        )
    logger.info(f"Renumbered {shifted} member(s) above palo {removed_palo}")
    return shifted
