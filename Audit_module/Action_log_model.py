"""
Action log model - append-only record of who did what.
"""
from sqlalchemy import Column, Integer, String, DateTime, JSON, ForeignKey

from database import Base
from Common_module.datetime_utils import now_local


class ActionLog(Base):
    """
    One row per business transaction.
    Actions: add_member, update_member, update_receipt, archive_member,
    restore_member, add_baptism, update_baptism, add_wedding, update_wedding
    """
    __tablename__ = "action_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    action = Column(String(100), nullable=False, index=True)
    details = Column(JSON, nullable=True)
    timestamp = Column(DateTime(timezone=True), default=now_local, nullable=False, index=True)
