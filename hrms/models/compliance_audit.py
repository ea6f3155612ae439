from sqlalchemy import Column, Integer, String, Date, DateTime
from sqlalchemy.sql import func
from hrms.database import Base


class ComplianceAudit(Base):
    __tablename__ = "compliance_audits"

    id = Column(Integer, primary_key=True, index=True)
    area = Column(String, nullable=False)  # e.g. "Labour Law", "WPS"
    last_audit_date = Column(Date, nullable=True)
    next_audit_date = Column(Date, nullable=True)
    findings_count = Column(Integer, default=0, nullable=False)
    score = Column(Integer, default=0, nullable=False)  # 0-100
    # compliant, needs_improvement, pending_review, non_compliant
    status = Column(String, default="pending_review", nullable=False)
    auditor_name = Column(String, nullable=True)
    report_url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
