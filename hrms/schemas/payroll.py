from pydantic import BaseModel, ConfigDict, Field
from datetime import date, datetime
from typing import Optional

from hrms.schemas.common import PartialUpdate
from hrms.schemas.employee import EmployeeSummary


class PayrollCreate(BaseModel):
    employee_id: int
    month: int = Field(..., ge=1, le=12)
    year: int = Field(..., ge=2000, le=2100)
    base_salary: float = Field(..., ge=0)
    bonus: float = Field(0.0, ge=0)
    deductions: float = Field(0.0, ge=0)
    tax: float = Field(0.0, ge=0)


class PayrollUpdate(PartialUpdate):
    base_salary: Optional[float] = Field(None, ge=0)
    bonus: Optional[float] = Field(None, ge=0)
    deductions: Optional[float] = Field(None, ge=0)
    tax: Optional[float] = Field(None, ge=0)


class PayrollPayment(BaseModel):
    payment_date: Optional[date] = None
    transaction_ref: Optional[str] = Field(None, max_length=100)


class PayrollResponse(BaseModel):
    id: int
    employee_id: int
    month: int
    year: int
    base_salary: float
    bonus: float
    deductions: float
    tax: float
    net_salary: float
    status: str
    payment_date: Optional[date] = None
    transaction_ref: Optional[str] = None
    created_at: Optional[datetime] = None
    employee: Optional[EmployeeSummary] = None

    model_config = ConfigDict(from_attributes=True)
