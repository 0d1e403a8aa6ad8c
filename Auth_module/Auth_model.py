from sqlalchemy import Column, Integer, String, DateTime
from database import Base
from Common_module.datetime_utils import now_local


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    role = Column(String(50), nullable=False, default="user", server_default="user")
    created_at = Column(DateTime(timezone=True), default=now_local)


class Role(Base):
    """Role catalogue shown on the admin screen. Permissions themselves live in Auth_module.permissions."""
    __tablename__ = "roles"

    role_name = Column(String(50), primary_key=True)
    description = Column(String(255), nullable=True)
