# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import (
    department, employee,
    leave_request, benefit, payroll,
    asset, expense, disciplinary_action, health_insurance,
    compliance_audit, performance_review,
    attendance, visa, driving_licence, vehicle, company_setting,
    audit_log,
)

# Explicit class exports for cleaner imports
from .department import Department
from .employee import Employee, EmployeeStatus
from .leave_request import LeaveRequest, LeaveStatus
from .benefit import BenefitRecord, BenefitStatus
from .payroll import Payroll, PayrollStatus
from .asset import Asset
from .expense import Expense
from .disciplinary_action import DisciplinaryAction
from .health_insurance import HealthInsurance
from .compliance_audit import ComplianceAudit
from .performance_review import PerformanceReview
from .attendance import Attendance, AttendanceStatus
from .visa import Visa
from .driving_licence import DrivingLicence
from .vehicle import Vehicle
from .company_setting import CompanySetting
from .audit_log import AuditLog

__all__ = [
    "Department",
    "Employee",
    "EmployeeStatus",
    "LeaveRequest",
    "LeaveStatus",
    "BenefitRecord",
    "BenefitStatus",
    "Payroll",
    "PayrollStatus",
    "Asset",
    "Expense",
    "DisciplinaryAction",
    "HealthInsurance",
    "ComplianceAudit",
    "PerformanceReview",
    "Attendance",
    "AttendanceStatus",
    "Visa",
    "DrivingLicence",
    "Vehicle",
    "CompanySetting",
    "AuditLog",
]
