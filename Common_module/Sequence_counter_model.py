"""
Named counter rows.

A row doubles as the lock that serialises allocation for its sequence:
callers take it with SELECT ... FOR UPDATE before reading or shifting the
numbers it guards.
"""
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import Session

from database import Base

MEMBER_SEQUENCE = "members"
ARCHIVE_SEQUENCE = "archives"


class SequenceCounter(Base):
    __tablename__ = "sequence_counters"

    name = Column(String(50), primary_key=True)
    last_value = Column(Integer, nullable=False, default=0, server_default="0")


def lock_counter(db: Session, name: str) -> SequenceCounter:
    """Lock (creating if missing) the counter row for ``name`` until the transaction ends."""
    counter = (
        db.query(SequenceCounter)
        .filter(SequenceCounter.name == name)
        .with_for_update()
        .first()
    )
    if counter is None:
        counter = SequenceCounter(name=name, last_value=0)
        db.add(counter)
        db.flush()
    return counter
