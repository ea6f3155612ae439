"""
Report Service

Every report loads the raw rows and derives its numbers with the pure
functions in hrms.services.statistics. Nothing is cached between calls.
"""
from datetime import date, timedelta
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from hrms.models import (
    Asset, Attendance, BenefitRecord, ComplianceAudit, Department, DisciplinaryAction,
    DrivingLicence, Employee, Expense, HealthInsurance, LeaveRequest, Payroll,
    PerformanceReview, Vehicle, Visa,
)
from hrms.models.attendance import AttendanceStatus
from hrms.models.employee import EmployeeStatus
from hrms.models.leave_request import LeaveStatus
from hrms.models.payroll import PayrollStatus
from hrms.services import statistics
from hrms.services.benefit_service import summarize_benefits


def _attendance_counts(records) -> Dict[str, int]:
    counts = statistics.count_by(records, "status")
    return {s.value: counts.get(s.value, 0) for s in AttendanceStatus}


def expense_report(db: Session, start_date: Optional[date] = None, end_date: Optional[date] = None) -> Dict[str, Any]:
    query = db.query(Expense)
    if start_date and end_date:
        query = query.filter(Expense.expense_date.between(start_date, end_date))
    expenses = query.all()
    return {
        "total_expenses": len(expenses),
        "total_amount": statistics.total(expenses, "amount"),
        "by_category": statistics.count_by(expenses, "category"),
        "by_status": statistics.count_by(expenses, "status"),
    }


def asset_report(db: Session) -> Dict[str, Any]:
    assets = db.query(Asset).all()
    assigned = sum(1 for a in assets if a.assigned_to is not None)
    return {
        "total_assets": len(assets),
        "assigned_assets": assigned,
        "unassigned_assets": len(assets) - assigned,
        "total_value": statistics.total(assets, "value"),
        "by_status": statistics.count_by(assets, "status"),
    }


def benefit_report(db: Session) -> Dict[str, Any]:
    return summarize_benefits(db.query(BenefitRecord).all())


def payroll_report(db: Session, month: Optional[int] = None, year: Optional[int] = None) -> Dict[str, Any]:
    query = db.query(Payroll)
    if month:
        query = query.filter(Payroll.month == month)
    if year:
        query = query.filter(Payroll.year == year)
    payrolls = query.all()
    return {
        "total_payrolls": len(payrolls),
        "pending_payrolls": statistics.count_where(payrolls, "status", PayrollStatus.PENDING.value),
        "processed_payrolls": statistics.count_where(payrolls, "status", PayrollStatus.PROCESSED.value),
        "paid_payrolls": statistics.count_where(payrolls, "status", PayrollStatus.PAID.value),
        "total_amount": statistics.total(payrolls, "net_salary"),
        "average_net_salary": statistics.average(payrolls, "net_salary", ndigits=2),
    }


def disciplinary_report(db: Session) -> Dict[str, Any]:
    actions = db.query(DisciplinaryAction).all()
    active = statistics.count_where(actions, "status", "active")
    return {
        "total_disciplinary_actions": len(actions),
        "active_disciplinary_actions": active,
        "resolved_disciplinary_actions": len(actions) - active,
        "by_type": statistics.count_by(actions, "type"),
    }


def health_insurance_report(db: Session) -> Dict[str, Any]:
    policies = db.query(HealthInsurance).all()
    active = statistics.count_where(policies, "status", "active")
    return {
        "total_insurances": len(policies),
        "active_insurances": active,
        "expired_insurances": len(policies) - active,
        "total_premium": statistics.total(policies, "premium_amount"),
        "total_dependents": int(statistics.total(policies, "dependents_count")),
    }


def compliance_report(db: Session) -> Dict[str, Any]:
    audits = db.query(ComplianceAudit).all()
    compliant = statistics.count_where(audits, "status", "compliant")
    return {
        "total_audits": len(audits),
        "compliant_audits": compliant,
        "non_compliant_audits": len(audits) - compliant,
        "average_score": statistics.average(audits, "score", ndigits=2),
        "total_findings": int(statistics.total(audits, "findings_count")),
    }


def performance_report(db: Session) -> Dict[str, Any]:
    reviews = db.query(PerformanceReview).all()
    rated = [r for r in reviews if r.rating is not None]
    return {
        "total_reviews": len(reviews),
        "average_rating": statistics.average(rated, "rating", ndigits=2),
        "by_status": statistics.count_by(reviews, "status"),
    }


def attendance_report(db: Session, start_date: Optional[date] = None, end_date: Optional[date] = None) -> Dict[str, Any]:
    query = db.query(Attendance)
    if start_date and end_date:
        query = query.filter(Attendance.date.between(start_date, end_date))
    records = query.all()
    worked = [r for r in records if r.work_hours is not None]
    return {
        "total_records": len(records),
        "by_status": _attendance_counts(records),
        "total_work_hours": statistics.total(worked, "work_hours"),
        "average_work_hours": statistics.average(worked, "work_hours", ndigits=2),
    }


def expiring_documents_report(db: Session, within_days: int = 30, today: Optional[date] = None) -> Dict[str, Any]:
    """Visas, driving licences and insurance policies expiring within the window, plus those already expired."""
    today = today or date.today()
    cutoff = today + timedelta(days=within_days)
    items = []
    for kind, model, number_attr in (
        ("visa", Visa, "visa_number"),
        ("driving_licence", DrivingLicence, "licence_no"),
        ("health_insurance", HealthInsurance, "policy_number"),
    ):
        for record in db.query(model).filter(model.expiry_date <= cutoff).all():
            items.append({
                "kind": kind,
                "id": record.id,
                "employee_id": record.employee_id,
                "number": getattr(record, number_attr),
                "expiry_date": record.expiry_date.isoformat(),
                "expired": record.expiry_date < today,
            })
    items.sort(key=lambda item: item["expiry_date"])
    return {
        "as_of": today.isoformat(),
        "within_days": within_days,
        "expired": sum(1 for item in items if item["expired"]),
        "expiring": sum(1 for item in items if not item["expired"]),
        "items": items,
    }


def overall_report(db: Session) -> Dict[str, Any]:
    return {
        "total_employees": db.query(Employee).count(),
        "total_departments": db.query(Department).count(),
        "total_expenses": db.query(Expense).count(),
        "total_assets": db.query(Asset).count(),
        "total_benefits": db.query(BenefitRecord).count(),
        "total_payrolls": db.query(Payroll).count(),
        "total_leave_requests": db.query(LeaveRequest).count(),
        "total_disciplinary_actions": db.query(DisciplinaryAction).count(),
        "total_health_insurances": db.query(HealthInsurance).count(),
        "total_compliance_audits": db.query(ComplianceAudit).count(),
        "total_performance_reviews": db.query(PerformanceReview).count(),
        "total_attendance_records": db.query(Attendance).count(),
        "total_visas": db.query(Visa).count(),
        "total_driving_licences": db.query(DrivingLicence).count(),
        "total_vehicles": db.query(Vehicle).count(),
    }


def dashboard(db: Session, today: Optional[date] = None) -> Dict[str, Any]:
    """Headline numbers for the landing dashboard."""
    today = today or date.today()
    employees = db.query(Employee).all()
    leaves = db.query(LeaveRequest).all()
    on_leave_today = [
        leave for leave in leaves
        if leave.status == LeaveStatus.APPROVED.value and leave.start_date <= today <= leave.end_date
    ]
    departments = db.query(Department).all()
    return {
        "total_employees": len(employees),
        "active_employees": statistics.count_where(employees, "status", EmployeeStatus.ACTIVE.value),
        "monthly_payroll": statistics.total(
            [e for e in employees if e.status == EmployeeStatus.ACTIVE.value], "salary"
        ),
        "pending_leave_requests": statistics.count_where(leaves, "status", LeaveStatus.PENDING.value),
        "on_leave_today": len(on_leave_today),
        "attendance_today": _attendance_counts(db.query(Attendance).filter(Attendance.date == today).all()),
        "departments": [
            {"id": d.id, "name": d.name, "employee_count": d.employee_count} for d in departments
        ],
        "gratuity_liability": statistics.total(db.query(BenefitRecord).all(), "gratuity_amount"),
        "as_of": today.isoformat(),
    }
