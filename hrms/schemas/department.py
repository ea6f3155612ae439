from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime

from hrms.schemas.common import PartialUpdate


class DepartmentBase(BaseModel):
    """Base schema for department data."""
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    head: Optional[str] = None
    open_positions: int = Field(0, ge=0)
    color: Optional[str] = None


class DepartmentCreate(DepartmentBase):
    """Schema for creating a new department."""
    pass


class DepartmentUpdate(PartialUpdate):
    """Schema for updating a department."""
    nullable_fields = frozenset({"description", "head", "color"})

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    head: Optional[str] = None
    open_positions: Optional[int] = Field(None, ge=0)
    color: Optional[str] = None


class DepartmentResponse(DepartmentBase):
    """Schema for department response."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Computed fields
    employee_count: int = 0
