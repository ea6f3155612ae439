"""
Payroll Service Layer

This module provides the business logic layer for payroll operations,
keeping the router focused on HTTP request/response handling.

Status flow: pending -> processed -> paid. Net salary is always derived
from its components and frozen once the run is processed.
"""

from datetime import date
from typing import Any, Dict, List, Optional
import logging

from sqlalchemy.orm import Session

from hrms.core.exceptions import ConflictError, InvalidStateTransitionError
from hrms.models.payroll import Payroll, PayrollStatus
from hrms.services.audit import AuditService
from hrms.services.base import RecordRepository
from hrms.services.employee_service import ensure_employee

logger = logging.getLogger(__name__)


def calculate_net_salary(base_salary: float, bonus: float = 0.0, deductions: float = 0.0, tax: float = 0.0) -> float:
    """
    Net pay for a period. May come out negative; callers get a warning
    from validate_payroll_calculation rather than silent clamping.
    """
    return base_salary + bonus - deductions - tax


def validate_payroll_calculation(base_salary: float, deductions: float, tax: float = 0.0) -> Dict[str, Any]:
    """
    Validate payroll calculation for edge cases.

    Returns:
        Dict with validation results: {valid: bool, errors: [], warnings: [], net_pay}
    """
    errors = []
    warnings = []
    net_pay = base_salary - deductions - tax

    if net_pay < 0:
        errors.append(f"Negative net pay: {net_pay:.2f}. Deductions exceed base salary.")

    if base_salary > 0 and (deductions + tax) / base_salary > 0.5:
        warnings.append(f"High deduction ratio: {((deductions + tax) / base_salary) * 100:.1f}% of salary")

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
        "net_pay": net_pay
    }


def _snapshot(payroll: Payroll) -> Dict[str, Any]:
    return {"net_salary": payroll.net_salary, "status": payroll.status, "transaction_ref": payroll.transaction_ref}


def _repo(db: Session) -> RecordRepository[Payroll]:
    return RecordRepository(db, Payroll)


def list_payrolls(db: Session, employee_id: Optional[int] = None, status: Optional[str] = None) -> List[Payroll]:
    return _repo(db).list(employee_id=employee_id, status=status)


def get_payroll(db: Session, payroll_id: int) -> Payroll:
    return _repo(db).get(payroll_id)


def create_payroll(db: Session, data: Dict[str, Any]) -> Payroll:
    ensure_employee(db, data["employee_id"])

    existing = db.query(Payroll).filter(
        Payroll.employee_id == data["employee_id"],
        Payroll.month == data["month"],
        Payroll.year == data["year"]
    ).first()
    if existing:
        raise ConflictError(f"Payroll already exists for {data['month']}/{data['year']}")

    data = dict(data)
    data["net_salary"] = calculate_net_salary(
        data["base_salary"], data.get("bonus", 0.0), data.get("deductions", 0.0), data.get("tax", 0.0)
    )
    payroll = _repo(db).create(data)
    logger.info(f"Payroll {payroll.id} created for employee {payroll.employee_id} ({payroll.month}/{payroll.year})")
    return payroll


def update_payroll(db: Session, payroll_id: int, data: Dict[str, Any]) -> Payroll:
    payroll = get_payroll(db, payroll_id)
    if payroll.status != PayrollStatus.PENDING.value:
        raise InvalidStateTransitionError("payroll", payroll.status, "edit")

    for field, value in data.items():
        setattr(payroll, field, value)
    payroll.net_salary = calculate_net_salary(payroll.base_salary, payroll.bonus, payroll.deductions, payroll.tax)
    _repo(db).commit()
    db.refresh(payroll)
    return payroll


def _transition(db: Session, payroll_id: int, expected: PayrollStatus, target: PayrollStatus, action: str, **fields) -> Payroll:
    payroll = get_payroll(db, payroll_id)
    if payroll.status != expected.value:
        raise InvalidStateTransitionError("payroll", payroll.status, action)

    before = _snapshot(payroll)
    payroll.status = target.value
    for field, value in fields.items():
        setattr(payroll, field, value)
    AuditService.log(db, f"{action}_payroll", "payroll", payroll.id, before_state=before, after_state=_snapshot(payroll))
    _repo(db).commit()
    db.refresh(payroll)
    logger.info(f"Payroll {payroll.id} {target.value}")
    return payroll


def process_payroll(db: Session, payroll_id: int) -> Payroll:
    return _transition(db, payroll_id, PayrollStatus.PENDING, PayrollStatus.PROCESSED, "process")


def pay_payroll(db: Session, payroll_id: int, payment_date: Optional[date] = None, transaction_ref: Optional[str] = None) -> Payroll:
    return _transition(
        db, payroll_id, PayrollStatus.PROCESSED, PayrollStatus.PAID, "pay",
        payment_date=payment_date or date.today(),
        transaction_ref=transaction_ref,
    )


def delete_payroll(db: Session, payroll_id: int) -> None:
    payroll = get_payroll(db, payroll_id)
    if payroll.status == PayrollStatus.PAID.value:
        raise InvalidStateTransitionError("payroll", payroll.status, "delete")
    _repo(db).delete(payroll_id)
