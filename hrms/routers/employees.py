from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional

from hrms.database import get_db
from hrms.models.employee import EmployeeStatus
from hrms.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeResponse
from hrms.services.employee_service import EmployeeService

router = APIRouter(prefix="/employees", tags=["Employees"])


@router.get("", response_model=List[EmployeeResponse])
def list_employees(
    department_id: Optional[int] = None,
    status: Optional[EmployeeStatus] = None,
    db: Session = Depends(get_db)
):
    return EmployeeService(db).list_employees(
        department_id=department_id,
        status=status.value if status else None
    )


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(employee_in: EmployeeCreate, db: Session = Depends(get_db)):
    return EmployeeService(db).create(employee_in.model_dump())


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(employee_id: int, db: Session = Depends(get_db)):
    return EmployeeService(db).get(employee_id)


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(employee_id: int, employee_in: EmployeeUpdate, db: Session = Depends(get_db)):
    """
    Update an employee profile.
    A salary change re-syncs the employee's accruing gratuity records
    when automatic recalculation is enabled.
    """
    return EmployeeService(db).update(employee_id, employee_in.model_dump(exclude_unset=True))


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(employee_id: int, db: Session = Depends(get_db)):
    EmployeeService(db).delete(employee_id)
