from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional
from datetime import date, datetime

from hrms.models.employee import EmployeeStatus
from hrms.schemas.common import PartialUpdate


class EmployeeBase(BaseModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    position: str = Field(..., min_length=1)
    department_id: Optional[int] = None
    hire_date: date
    salary: float = Field(..., ge=0)
    status: EmployeeStatus = EmployeeStatus.ACTIVE


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeUpdate(PartialUpdate):
    nullable_fields = frozenset({"phone", "department_id"})

    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    position: Optional[str] = Field(None, min_length=1)
    department_id: Optional[int] = None
    hire_date: Optional[date] = None
    salary: Optional[float] = Field(None, ge=0)
    status: Optional[EmployeeStatus] = None


class EmployeeSummary(BaseModel):
    """Compact embedding used inside other records."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    department_id: Optional[int] = None


class EmployeeResponse(EmployeeBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
