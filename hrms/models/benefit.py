from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from hrms.database import Base
import enum


class BenefitStatus(str, enum.Enum):
    ACCRUING = "accruing"
    PAID_OUT = "paid_out"


class BenefitRecord(Base):
    """End-of-service gratuity record. gratuity_amount is always derived."""
    __tablename__ = "benefits"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    years_of_service = Column(Float, default=0.0, nullable=False)
    basic_salary = Column(Float, nullable=False)
    gratuity_amount = Column(Float, default=0.0, nullable=False)
    status = Column(String, default=BenefitStatus.ACCRUING.value, nullable=False)
    last_calculated = Column(DateTime(timezone=True), nullable=True)
    paid_out_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    employee = relationship("Employee", back_populates="benefits")
