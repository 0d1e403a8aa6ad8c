from sqlalchemy import Column, Integer, String, Date, DateTime, Boolean, false
from database import Base
from Common_module.datetime_utils import now_local


class Baptism(Base):
    __tablename__ = "baptisms"

    id = Column(Integer, primary_key=True, index=True)

    first_name = Column(String(100), nullable=False)
    middle_name = Column(String(100), nullable=True)
    surname = Column(String(100), nullable=False, index=True)
    date_of_birth = Column(Date, nullable=False)

    father_first_name = Column(String(100), nullable=False)
    father_middle_name = Column(String(100), nullable=True)
    father_surname = Column(String(100), nullable=False)
    mother_first_name = Column(String(100), nullable=False)
    mother_middle_name = Column(String(100), nullable=True)
    mother_surname = Column(String(100), nullable=False)

    baptism_date = Column(Date, nullable=False, index=True)
    pastor = Column(String(150), nullable=False)

    archived = Column(Boolean, nullable=False, default=False, server_default=false(), index=True)

    created_at = Column(DateTime(timezone=True), default=now_local)
    updated_at = Column(DateTime(timezone=True), onupdate=now_local)
