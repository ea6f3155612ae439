"""
Payroll Router

Handles HTTP endpoints for payroll operations.
All business logic is delegated to the payroll service layer.
"""

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from pydantic import BaseModel, Field

from hrms.database import get_db
from hrms.models.payroll import PayrollStatus
from hrms.schemas.payroll import PayrollCreate, PayrollUpdate, PayrollPayment, PayrollResponse
from hrms.services import payroll_service


router = APIRouter(prefix="/payrolls", tags=["Payroll"])


class ValidatePayrollRequest(BaseModel):
    base_salary: float = Field(..., ge=0)
    estimated_deductions: float = Field(0.0, ge=0)
    estimated_tax: float = Field(0.0, ge=0)


@router.get("", response_model=List[PayrollResponse])
def list_payrolls(
    employee_id: Optional[int] = None,
    status: Optional[PayrollStatus] = None,
    db: Session = Depends(get_db)
):
    return payroll_service.list_payrolls(db, employee_id, status.value if status else None)


@router.post("", response_model=PayrollResponse, status_code=status.HTTP_201_CREATED)
def create_payroll(payroll_in: PayrollCreate, db: Session = Depends(get_db)):
    """Create a pending payroll entry; net salary is derived from its components."""
    return payroll_service.create_payroll(db, payroll_in.model_dump())


@router.post("/validate")
def validate_payroll(request: ValidatePayrollRequest):
    """
    Validate a payroll calculation before running it.
    Returns errors (negative net pay) and warnings (high deduction ratio).
    """
    return payroll_service.validate_payroll_calculation(
        request.base_salary, request.estimated_deductions, request.estimated_tax
    )


@router.get("/{payroll_id}", response_model=PayrollResponse)
def get_payroll(payroll_id: int, db: Session = Depends(get_db)):
    return payroll_service.get_payroll(db, payroll_id)


@router.put("/{payroll_id}", response_model=PayrollResponse)
def update_payroll(payroll_id: int, payroll_in: PayrollUpdate, db: Session = Depends(get_db)):
    return payroll_service.update_payroll(db, payroll_id, payroll_in.model_dump(exclude_unset=True))


@router.post("/{payroll_id}/process", response_model=PayrollResponse)
def process_payroll(payroll_id: int, db: Session = Depends(get_db)):
    return payroll_service.process_payroll(db, payroll_id)


@router.post("/{payroll_id}/pay", response_model=PayrollResponse)
def pay_payroll(
    payroll_id: int,
    payment: Optional[PayrollPayment] = Body(None),
    db: Session = Depends(get_db)
):
    """Mark a processed payroll as paid (WPS transfer reference optional)."""
    payment = payment or PayrollPayment()
    return payroll_service.pay_payroll(db, payroll_id, payment.payment_date, payment.transaction_ref)


@router.delete("/{payroll_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_payroll(payroll_id: int, db: Session = Depends(get_db)):
    payroll_service.delete_payroll(db, payroll_id)
