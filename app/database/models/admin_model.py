from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from database.init import Base


class Admin(Base):
    """A PG/hostel business using the system. Its operational data lives in tenant_<id>_* tables."""

    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(15), nullable=True)
    hostel_name = Column(String(255), nullable=True)
    hashed_password = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
