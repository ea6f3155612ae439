from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional
from datetime import datetime

from hrms.schemas.common import PartialUpdate

CLOCK_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class CompanySettingsUpdate(PartialUpdate):
    nullable_fields = frozenset({"company_email", "company_phone"})

    company_name: Optional[str] = Field(None, min_length=1)
    company_email: Optional[EmailStr] = None
    company_phone: Optional[str] = None
    timezone: Optional[str] = Field(None, min_length=1)
    work_start: Optional[str] = Field(None, pattern=CLOCK_PATTERN)
    work_end: Optional[str] = Field(None, pattern=CLOCK_PATTERN)


class CompanySettingsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    company_name: str
    company_email: Optional[str] = None
    company_phone: Optional[str] = None
    timezone: str
    work_start: str
    work_end: str
    updated_at: Optional[datetime] = None
