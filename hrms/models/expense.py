from sqlalchemy import Column, Integer, String, Float, Date, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from hrms.database import Base


class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    category = Column(String, default="other", nullable=False)  # travel, meals, supplies, internet, other
    amount = Column(Float, nullable=False)
    description = Column(Text, nullable=True)
    receipt_url = Column(String, nullable=True)
    expense_date = Column(Date, nullable=False)
    status = Column(String, default="pending", nullable=False)  # pending, approved, rejected, paid
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    employee = relationship("Employee")
