from sqlalchemy import Column, Integer, String, Float, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from hrms.database import Base


class HealthInsurance(Base):
    __tablename__ = "health_insurances"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    policy_number = Column(String, unique=True, nullable=False)
    provider_name = Column(String, nullable=False)
    plan_name = Column(String, nullable=True)
    dependents_count = Column(Integer, default=0, nullable=False)
    premium_amount = Column(Float, default=0.0, nullable=False)
    expiry_date = Column(Date, nullable=False)
    status = Column(String, default="active", nullable=False)  # active, expiring_soon, expired
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    employee = relationship("Employee")
