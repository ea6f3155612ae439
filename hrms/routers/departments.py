from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from hrms.database import get_db
from hrms.schemas.department import DepartmentCreate, DepartmentUpdate, DepartmentResponse
from hrms.services.employee_service import DepartmentService

router = APIRouter(prefix="/departments", tags=["Departments"])


@router.get("", response_model=List[DepartmentResponse])
def list_departments(db: Session = Depends(get_db)):
    return DepartmentService(db).list()


@router.post("", response_model=DepartmentResponse, status_code=status.HTTP_201_CREATED)
def create_department(department_in: DepartmentCreate, db: Session = Depends(get_db)):
    return DepartmentService(db).create(department_in.model_dump())


@router.get("/{department_id}", response_model=DepartmentResponse)
def get_department(department_id: int, db: Session = Depends(get_db)):
    return DepartmentService(db).get(department_id)


@router.put("/{department_id}", response_model=DepartmentResponse)
def update_department(department_id: int, department_in: DepartmentUpdate, db: Session = Depends(get_db)):
    return DepartmentService(db).update(department_id, department_in.model_dump(exclude_unset=True))


@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_department(department_id: int, db: Session = Depends(get_db)):
    """Delete a department. Its employees are kept with no department."""
    DepartmentService(db).delete(department_id)
