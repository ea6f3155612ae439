from sqlalchemy import Column, Integer, String, Date, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from hrms.database import Base


class DisciplinaryAction(Base):
    __tablename__ = "disciplinary_actions"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    # verbal_warning, written_warning, final_warning, suspension, termination
    type = Column(String, nullable=False)
    reason = Column(Text, nullable=False)
    incident_date = Column(Date, nullable=False)
    issued_by = Column(Integer, ForeignKey("employees.id", ondelete="SET NULL"), nullable=True)
    status = Column(String, default="active", nullable=False)  # active, under_review, resolved
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    employee = relationship("Employee", foreign_keys=[employee_id])
