"""
Schemas for the plain CRUD records: assets, expenses, disciplinary actions,
health insurance policies, compliance audits, performance reviews, attendance,
visas, driving licences and vehicles.
"""
from pydantic import BaseModel, ConfigDict, Field, model_validator
from datetime import date, datetime, time
from typing import Literal, Optional

from hrms.schemas.common import PartialUpdate

AssetType = Literal["electronics", "furniture", "vehicle", "other"]
AssetStatus = Literal["available", "assigned", "maintenance", "scrapped"]
ExpenseCategory = Literal["travel", "meals", "supplies", "internet", "other"]
ExpenseStatus = Literal["pending", "approved", "rejected", "paid"]
DisciplinaryType = Literal["verbal_warning", "written_warning", "final_warning", "suspension", "termination"]
DisciplinaryStatus = Literal["active", "under_review", "resolved"]
ExpiryStatus = Literal["active", "expiring_soon", "expired"]
ComplianceStatus = Literal["compliant", "needs_improvement", "pending_review", "non_compliant"]
ReviewStatus = Literal["scheduled", "completed", "acknowledged"]
AttendanceStatus = Literal["present", "absent", "late", "half_day", "on_leave"]
VisaType = Literal["work_visa", "residence_visa", "visit_visa"]
VehicleType = Literal["car", "truck", "bike", "van"]
VehicleStatus = Literal["active", "maintenance", "out_of_service"]

# Attendance rows have a field called "date"
Day = date


# --- Assets ---
class AssetCreate(BaseModel):
    name: str = Field(..., min_length=1)
    serial_number: Optional[str] = None
    type: AssetType = "other"
    purchase_date: Optional[date] = None
    value: float = Field(0.0, ge=0)
    assigned_to: Optional[int] = None
    status: AssetStatus = "available"


class AssetUpdate(PartialUpdate):
    nullable_fields = frozenset({"serial_number", "purchase_date", "assigned_to"})

    name: Optional[str] = Field(None, min_length=1)
    serial_number: Optional[str] = None
    type: Optional[AssetType] = None
    purchase_date: Optional[date] = None
    value: Optional[float] = Field(None, ge=0)
    assigned_to: Optional[int] = None
    status: Optional[AssetStatus] = None


class AssetResponse(AssetCreate):
    model_config = ConfigDict(from_attributes=True)
    id: int
    created_at: Optional[datetime] = None


# --- Expenses ---
class ExpenseCreate(BaseModel):
    employee_id: int
    category: ExpenseCategory = "other"
    amount: float = Field(..., ge=0)
    description: Optional[str] = None
    receipt_url: Optional[str] = None
    expense_date: date
    status: ExpenseStatus = "pending"


class ExpenseUpdate(PartialUpdate):
    nullable_fields = frozenset({"description", "receipt_url"})

    category: Optional[ExpenseCategory] = None
    amount: Optional[float] = Field(None, ge=0)
    description: Optional[str] = None
    receipt_url: Optional[str] = None
    expense_date: Optional[date] = None
    status: Optional[ExpenseStatus] = None


class ExpenseResponse(ExpenseCreate):
    model_config = ConfigDict(from_attributes=True)
    id: int
    created_at: Optional[datetime] = None


# --- Disciplinary actions ---
class DisciplinaryCreate(BaseModel):
    employee_id: int
    type: DisciplinaryType
    reason: str = Field(..., min_length=1)
    incident_date: date
    issued_by: Optional[int] = None
    status: DisciplinaryStatus = "active"


class DisciplinaryUpdate(PartialUpdate):
    nullable_fields = frozenset({"issued_by"})

    type: Optional[DisciplinaryType] = None
    reason: Optional[str] = Field(None, min_length=1)
    incident_date: Optional[date] = None
    issued_by: Optional[int] = None
    status: Optional[DisciplinaryStatus] = None


class DisciplinaryResponse(DisciplinaryCreate):
    model_config = ConfigDict(from_attributes=True)
    id: int
    created_at: Optional[datetime] = None


# --- Health insurance ---
class HealthInsuranceCreate(BaseModel):
    employee_id: int
    policy_number: str = Field(..., min_length=1)
    provider_name: str = Field(..., min_length=1)
    plan_name: Optional[str] = None
    dependents_count: int = Field(0, ge=0)
    premium_amount: float = Field(0.0, ge=0)
    expiry_date: date
    status: ExpiryStatus = "active"


class HealthInsuranceUpdate(PartialUpdate):
    nullable_fields = frozenset({"plan_name"})

    provider_name: Optional[str] = Field(None, min_length=1)
    plan_name: Optional[str] = None
    dependents_count: Optional[int] = Field(None, ge=0)
    premium_amount: Optional[float] = Field(None, ge=0)
    expiry_date: Optional[date] = None
    status: Optional[ExpiryStatus] = None


class HealthInsuranceResponse(HealthInsuranceCreate):
    model_config = ConfigDict(from_attributes=True)
    id: int
    created_at: Optional[datetime] = None


# --- Compliance audits ---
class ComplianceAuditCreate(BaseModel):
    area: str = Field(..., min_length=1)
    last_audit_date: Optional[date] = None
    next_audit_date: Optional[date] = None
    findings_count: int = Field(0, ge=0)
    score: int = Field(0, ge=0, le=100)
    status: ComplianceStatus = "pending_review"
    auditor_name: Optional[str] = None
    report_url: Optional[str] = None


class ComplianceAuditUpdate(PartialUpdate):
    nullable_fields = frozenset({"last_audit_date", "next_audit_date", "auditor_name", "report_url"})

    area: Optional[str] = Field(None, min_length=1)
    last_audit_date: Optional[date] = None
    next_audit_date: Optional[date] = None
    findings_count: Optional[int] = Field(None, ge=0)
    score: Optional[int] = Field(None, ge=0, le=100)
    status: Optional[ComplianceStatus] = None
    auditor_name: Optional[str] = None
    report_url: Optional[str] = None


class ComplianceAuditResponse(ComplianceAuditCreate):
    model_config = ConfigDict(from_attributes=True)
    id: int
    created_at: Optional[datetime] = None


# --- Performance reviews ---
class PerformanceReviewCreate(BaseModel):
    employee_id: int
    reviewer_id: Optional[int] = None
    review_period_start: date
    review_period_end: date
    rating: Optional[float] = Field(None, ge=1, le=5)
    comments: Optional[str] = None
    status: ReviewStatus = "scheduled"

    @model_validator(mode="after")
    def check_period(self):
        if self.review_period_end < self.review_period_start:
            raise ValueError("review_period_end must not be before review_period_start")
        return self


class PerformanceReviewUpdate(PartialUpdate):
    nullable_fields = frozenset({"reviewer_id", "rating", "comments"})

    reviewer_id: Optional[int] = None
    review_period_start: Optional[date] = None
    review_period_end: Optional[date] = None
    rating: Optional[float] = Field(None, ge=1, le=5)
    comments: Optional[str] = None
    status: Optional[ReviewStatus] = None


class PerformanceReviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    employee_id: int
    reviewer_id: Optional[int] = None
    review_period_start: date
    review_period_end: date
    rating: Optional[float] = None
    comments: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None


# --- Attendance ---
class AttendanceCreate(BaseModel):
    employee_id: int
    date: Day
    check_in: Optional[time] = None
    check_out: Optional[time] = None
    status: AttendanceStatus = "absent"
    work_hours: Optional[float] = Field(None, ge=0, le=24)
    notes: Optional[str] = None

    @model_validator(mode="after")
    def derive_work_hours(self):
        if self.check_in and self.check_out:
            if self.check_out < self.check_in:
                raise ValueError("check_out must not be before check_in")
            if self.work_hours is None:
                start = self.check_in.hour * 60 + self.check_in.minute
                end = self.check_out.hour * 60 + self.check_out.minute
                self.work_hours = round((end - start) / 60, 2)
        return self


class AttendanceUpdate(PartialUpdate):
    nullable_fields = frozenset({"check_in", "check_out", "work_hours", "notes"})

    check_in: Optional[time] = None
    check_out: Optional[time] = None
    status: Optional[AttendanceStatus] = None
    work_hours: Optional[float] = Field(None, ge=0, le=24)
    notes: Optional[str] = None


class AttendanceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    employee_id: int
    date: Day
    check_in: Optional[time] = None
    check_out: Optional[time] = None
    status: str
    work_hours: Optional[float] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None


# --- Visas and driving licences ---
class _IssuedDocument(BaseModel):
    issue_date: date
    expiry_date: date

    @model_validator(mode="after")
    def check_validity(self):
        if self.expiry_date < self.issue_date:
            raise ValueError("expiry_date must not be before issue_date")
        return self


class VisaCreate(_IssuedDocument):
    employee_id: int
    type: VisaType
    visa_number: str = Field(..., min_length=1)
    status: ExpiryStatus = "active"


class VisaUpdate(PartialUpdate):
    type: Optional[VisaType] = None
    issue_date: Optional[date] = None
    expiry_date: Optional[date] = None
    status: Optional[ExpiryStatus] = None


class VisaResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    employee_id: int
    type: str
    visa_number: str
    issue_date: date
    expiry_date: date
    status: str
    created_at: Optional[datetime] = None


class DrivingLicenceCreate(_IssuedDocument):
    employee_id: int
    licence_no: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    status: ExpiryStatus = "active"


class DrivingLicenceUpdate(PartialUpdate):
    category: Optional[str] = Field(None, min_length=1)
    issue_date: Optional[date] = None
    expiry_date: Optional[date] = None
    status: Optional[ExpiryStatus] = None


class DrivingLicenceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    employee_id: int
    licence_no: str
    category: str
    issue_date: date
    expiry_date: date
    status: str
    created_at: Optional[datetime] = None


# --- Vehicles ---
class VehicleCreate(BaseModel):
    make: str = Field("Unknown", min_length=1)
    model: str = Field(..., min_length=1)
    year: Optional[str] = None
    plate_number: str = Field(..., min_length=1)
    type: VehicleType = "car"
    status: VehicleStatus = "active"
    next_service: Optional[date] = None
    assigned_driver_id: Optional[int] = None


class VehicleUpdate(PartialUpdate):
    nullable_fields = frozenset({"year", "next_service", "assigned_driver_id"})

    make: Optional[str] = Field(None, min_length=1)
    model: Optional[str] = Field(None, min_length=1)
    year: Optional[str] = None
    type: Optional[VehicleType] = None
    status: Optional[VehicleStatus] = None
    next_service: Optional[date] = None
    assigned_driver_id: Optional[int] = None


class VehicleResponse(VehicleCreate):
    model_config = ConfigDict(from_attributes=True)
    id: int
    created_at: Optional[datetime] = None
