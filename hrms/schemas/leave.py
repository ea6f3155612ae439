from pydantic import BaseModel, ConfigDict, Field
from datetime import date, datetime
from typing import Optional

from hrms.schemas.common import PartialUpdate
from hrms.schemas.employee import EmployeeSummary


class LeaveRequestCreate(BaseModel):
    employee_id: int
    leave_type: str = Field(..., min_length=1)
    start_date: date
    end_date: date
    reason: Optional[str] = None


class LeaveRequestUpdate(PartialUpdate):
    """Administrative edit. Status and day count are not writable here."""
    nullable_fields = frozenset({"reason"})

    leave_type: Optional[str] = Field(None, min_length=1)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    reason: Optional[str] = None


class LeaveDecision(BaseModel):
    comment: Optional[str] = None


class LeaveRequestResponse(BaseModel):
    id: int
    employee_id: int
    leave_type: str
    start_date: date
    end_date: date
    days: int
    reason: Optional[str] = None
    status: str
    decided_at: Optional[datetime] = None
    decision_comment: Optional[str] = None
    created_at: Optional[datetime] = None
    employee: Optional[EmployeeSummary] = None

    model_config = ConfigDict(from_attributes=True)


class LeaveBalanceResponse(BaseModel):
    leave_type: str
    total_days: int
    used_days: int
    remaining_days: int
