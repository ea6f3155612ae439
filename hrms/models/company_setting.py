from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from hrms.database import Base


class CompanySetting(Base):
    """Single-row table holding the company profile and working hours."""
    __tablename__ = "company_settings"

    id = Column(Integer, primary_key=True, index=True)
    company_name = Column(String, default="My Company", nullable=False)
    company_email = Column(String, nullable=True)
    company_phone = Column(String, nullable=True)
    timezone = Column(String, default="UTC", nullable=False)
    work_start = Column(String, default="09:00", nullable=False)  # HH:MM
    work_end = Column(String, default="17:00", nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
