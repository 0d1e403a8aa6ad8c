"""
Archive of retired records.
One table for every kind; ``details`` holds a snapshot of the source row
taken when it was archived and is never re-validated against it.
"""
from sqlalchemy import Column, Integer, String, DateTime, JSON

from database import Base
from Common_module.datetime_utils import now_local

MEMBER = "member"
BAPTISM = "baptism"
WEDDING = "wedding"


class Archive(Base):
    __tablename__ = "archives"

    id = Column(Integer, primary_key=True, index=True)
    record_type = Column(String(20), nullable=False, index=True)  # member, baptism, wedding
    details = Column(JSON, nullable=False, default=dict)

    # Archive register number, member records only. Separate from the live
    # member palo and never handed out twice.
    palo = Column(Integer, nullable=True, index=True)

    archived_date = Column(DateTime(timezone=True), default=now_local, nullable=False, index=True)
