"""
Employee Service Layer

Owns employee and department persistence rules:
- department membership is validated against the departments table
- a salary change re-syncs the employee's accruing gratuity records
"""
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from hrms.core.config import settings
from hrms.core.exceptions import ConflictError
from hrms.models.department import Department
from hrms.models.employee import Employee
from hrms.services.base import RecordRepository, column_values
from hrms.services.benefit_service import BenefitService


def ensure_employee(db: Session, employee_id: Optional[int]) -> Optional[Employee]:
    """Raises NotFoundError when a referenced employee does not exist."""
    if employee_id is None:
        return None
    return RecordRepository(db, Employee).get(employee_id)


class DepartmentService(RecordRepository[Department]):
    def __init__(self, db: Session):
        super().__init__(db, Department)

    def _check_unique_name(self, name: Optional[str], record_id: Optional[int] = None):
        if name is None:
            return
        existing = self.db.query(Department).filter(Department.name == name).first()
        if existing and existing.id != record_id:
            raise ConflictError(f"Department '{name}' already exists")

    def create(self, data: Dict[str, Any]) -> Department:
        self._check_unique_name(data.get("name"))
        return super().create(data)

    def update(self, record_id: int, data: Dict[str, Any]) -> Department:
        self._check_unique_name(data.get("name"), record_id)
        return super().update(record_id, data)


class EmployeeService(RecordRepository[Employee]):
    def __init__(self, db: Session):
        super().__init__(db, Employee)

    def _check_department(self, data: Dict[str, Any]):
        if data.get("department_id") is not None:
            DepartmentService(self.db).get(data["department_id"])

    def _check_unique_email(self, email: Optional[str], record_id: Optional[int] = None):
        if email is None:
            return
        existing = self.db.query(Employee).filter(Employee.email == email).first()
        if existing and existing.id != record_id:
            raise ConflictError(f"Employee with email {email} already exists")

    def list_employees(self, department_id: Optional[int] = None, status: Optional[str] = None) -> List[Employee]:
        return self.list(department_id=department_id, status=status)

    def create(self, data: Dict[str, Any]) -> Employee:
        self._check_department(data)
        self._check_unique_email(data.get("email"))
        return super().create(data)

    def update(self, record_id: int, data: Dict[str, Any]) -> Employee:
        self._check_department(data)
        self._check_unique_email(data.get("email"), record_id)
        employee = self.get(record_id)
        salary_changed = "salary" in data and data["salary"] != employee.salary

        # Profile edit and gratuity re-sync land in one commit
        synced = 0
        try:
            for field, value in column_values(data).items():
                setattr(employee, field, value)
            if salary_changed and settings.auto_recalculate_gratuity:
                synced = BenefitService(self.db).sync_salary(employee)
        except Exception:
            self.db.rollback()
            raise
        self.commit()
        self.db.refresh(employee)

        if synced:
            self.log_info(f"Salary change for employee {employee.id} recalculated {synced} gratuity record(s)")
        return employee
