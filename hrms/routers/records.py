"""
CRUD routers for records without workflow rules.
One router per resource, built from the same template.
"""
from typing import List, Optional, Type

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from hrms.database import get_db
from hrms.models import (
    Asset, Attendance, ComplianceAudit, DisciplinaryAction, DrivingLicence, Expense,
    HealthInsurance, PerformanceReview, Vehicle, Visa,
)
from hrms.schemas import records as schemas
from hrms.services.base import RecordRepository
from hrms.services.employee_service import ensure_employee

EMPLOYEE_REFERENCES = ("employee_id", "assigned_to", "issued_by", "reviewer_id", "assigned_driver_id")


def _check_references(db: Session, data: dict):
    for field in EMPLOYEE_REFERENCES:
        if data.get(field) is not None:
            ensure_employee(db, data[field])


def build_crud_router(
    prefix: str,
    tag: str,
    model,
    entity_name: str,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[tag])
    has_employee = hasattr(model, "employee_id")

    def repo(db: Session) -> RecordRepository:
        return RecordRepository(db, model, entity_name)

    @router.get("", response_model=List[response_schema], name=f"list_{prefix.strip('/')}")
    def list_records(employee_id: Optional[int] = None, db: Session = Depends(get_db)):
        if has_employee:
            return repo(db).list(employee_id=employee_id)
        return repo(db).list()

    @router.post("", response_model=response_schema, status_code=status.HTTP_201_CREATED, name=f"create_{prefix.strip('/')}")
    def create_record(payload: create_schema, db: Session = Depends(get_db)):
        data = payload.model_dump()
        _check_references(db, data)
        return repo(db).create(data)

    @router.get("/{record_id}", response_model=response_schema, name=f"get_{prefix.strip('/')}")
    def get_record(record_id: int, db: Session = Depends(get_db)):
        return repo(db).get(record_id)

    @router.put("/{record_id}", response_model=response_schema, name=f"update_{prefix.strip('/')}")
    def update_record(record_id: int, payload: update_schema, db: Session = Depends(get_db)):
        data = payload.model_dump(exclude_unset=True)
        _check_references(db, data)
        return repo(db).update(record_id, data)

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT, name=f"delete_{prefix.strip('/')}")
    def delete_record(record_id: int, db: Session = Depends(get_db)):
        repo(db).delete(record_id)

    return router


assets_router = build_crud_router(
    "/assets", "Company Assets", Asset, "Asset",
    schemas.AssetCreate, schemas.AssetUpdate, schemas.AssetResponse,
)
expenses_router = build_crud_router(
    "/expenses", "Company Expenses", Expense, "Expense",
    schemas.ExpenseCreate, schemas.ExpenseUpdate, schemas.ExpenseResponse,
)
disciplinary_router = build_crud_router(
    "/disciplinary", "Disciplinary", DisciplinaryAction, "Disciplinary action",
    schemas.DisciplinaryCreate, schemas.DisciplinaryUpdate, schemas.DisciplinaryResponse,
)
health_insurance_router = build_crud_router(
    "/health-insurance", "Health Insurance", HealthInsurance, "Health insurance",
    schemas.HealthInsuranceCreate, schemas.HealthInsuranceUpdate, schemas.HealthInsuranceResponse,
)
compliance_router = build_crud_router(
    "/compliance", "Compliance Audit", ComplianceAudit, "Compliance audit",
    schemas.ComplianceAuditCreate, schemas.ComplianceAuditUpdate, schemas.ComplianceAuditResponse,
)
performance_router = build_crud_router(
    "/performance", "Performance", PerformanceReview, "Performance review",
    schemas.PerformanceReviewCreate, schemas.PerformanceReviewUpdate, schemas.PerformanceReviewResponse,
)
attendance_router = build_crud_router(
    "/attendance", "Attendance", Attendance, "Attendance record",
    schemas.AttendanceCreate, schemas.AttendanceUpdate, schemas.AttendanceResponse,
)
visas_router = build_crud_router(
    "/visas", "Visas", Visa, "Visa",
    schemas.VisaCreate, schemas.VisaUpdate, schemas.VisaResponse,
)
driving_licences_router = build_crud_router(
    "/driving-licences", "Driving Licences", DrivingLicence, "Driving licence",
    schemas.DrivingLicenceCreate, schemas.DrivingLicenceUpdate, schemas.DrivingLicenceResponse,
)
vehicles_router = build_crud_router(
    "/vehicles", "Vehicles", Vehicle, "Vehicle",
    schemas.VehicleCreate, schemas.VehicleUpdate, schemas.VehicleResponse,
)
