from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from hrms.database import Base


class DrivingLicence(Base):
    __tablename__ = "driving_licences"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    licence_no = Column(String, unique=True, nullable=False)
    category = Column(String, nullable=False)  # e.g. "Light Vehicle", "Heavy Truck"
    issue_date = Column(Date, nullable=False)
    expiry_date = Column(Date, nullable=False, index=True)
    status = Column(String, default="active", nullable=False)  # active, expiring_soon, expired
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    employee = relationship("Employee")
