from pydantic import BaseModel, ConfigDict, Field
from datetime import date, datetime
from typing import Dict, Optional

from hrms.schemas.common import PartialUpdate
from hrms.schemas.employee import EmployeeSummary


class BenefitCreate(BaseModel):
    employee_id: int
    years_of_service: float = Field(..., ge=0)
    basic_salary: float = Field(..., ge=0)


class BenefitUpdate(PartialUpdate):
    """Inputs only: gratuity_amount is derived and status changes through payout."""
    years_of_service: Optional[float] = Field(None, ge=0)
    basic_salary: Optional[float] = Field(None, ge=0)


class BenefitRecalculateRequest(BaseModel):
    """
    Explicit recalculation. Omitted fields are taken from the employee:
    tenure from hire_date (as of `as_of`, default today), salary from the profile.
    """
    years_of_service: Optional[float] = Field(None, ge=0)
    basic_salary: Optional[float] = Field(None, ge=0)
    as_of: Optional[date] = None


class GratuityQuote(BaseModel):
    years_of_service: float = Field(..., ge=0)
    basic_salary: float = Field(..., ge=0)


class GratuityQuoteResponse(GratuityQuote):
    gratuity_amount: float


class BenefitResponse(BaseModel):
    id: int
    employee_id: int
    years_of_service: float
    basic_salary: float
    gratuity_amount: float
    status: str
    last_calculated: Optional[datetime] = None
    paid_out_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    employee: Optional[EmployeeSummary] = None

    model_config = ConfigDict(from_attributes=True)


class BenefitSummaryResponse(BaseModel):
    total_records: int
    total_liability: float
    average_years_of_service: float
    accruing: int
    paid_out: int
    by_service: Dict[str, int]
    by_amount: Dict[str, int]
    currency: str
