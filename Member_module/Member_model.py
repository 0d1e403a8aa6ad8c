from sqlalchemy import Column, Integer, String, DateTime, JSON
from database import Base
from Common_module.datetime_utils import now_local


class Member(Base):
    __tablename__ = "members"

    id = Column(Integer, primary_key=True, index=True)

    # Register number. Active members always hold exactly 1..N.
    palo = Column(Integer, nullable=False, unique=True, index=True)

    first_name = Column(String(100), nullable=False)
    surname = Column(String(100), nullable=False)

    # Yearly contribution receipts: {"2024": "R-1182", "2025": None}
    receipts = Column(JSON, nullable=False, default=dict)

    created_at = Column(DateTime(timezone=True), default=now_local)
    updated_at = Column(DateTime(timezone=True), onupdate=now_local)
