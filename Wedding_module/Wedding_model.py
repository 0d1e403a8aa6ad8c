from sqlalchemy import Column, Integer, String, Date, DateTime, Boolean, false
from database import Base
from Common_module.datetime_utils import now_local


class Wedding(Base):
    __tablename__ = "weddings"

    id = Column(Integer, primary_key=True, index=True)

    groom_first_name = Column(String(100), nullable=False)
    groom_middle_name = Column(String(100), nullable=True)
    groom_surname = Column(String(100), nullable=False, index=True)
    groom_id_number = Column(String(50), nullable=True)

    bride_first_name = Column(String(100), nullable=False)
    bride_middle_name = Column(String(100), nullable=True)
    bride_surname = Column(String(100), nullable=False, index=True)
    bride_id_number = Column(String(50), nullable=True)

    wedding_date = Column(Date, nullable=False, index=True)
    pastor = Column(String(150), nullable=False)
    location = Column(String(255), nullable=False)

    archived = Column(Boolean, nullable=False, default=False, server_default=false(), index=True)

    created_at = Column(DateTime(timezone=True), default=now_local)
    updated_at = Column(DateTime(timezone=True), onupdate=now_local)
