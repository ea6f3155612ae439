"""
Benefit (gratuity) Service Layer

The only writers of BenefitRecord.status and BenefitRecord.gratuity_amount:
- create / update inputs    -> amount recomputed from the gratuity formula
- recalculate               -> amount recomputed, only while accruing
- payout                    -> accruing -> paid_out, once
"""
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from hrms.core.config import settings
from hrms.core.exceptions import InvalidStateTransitionError
from hrms.models.benefit import BenefitRecord, BenefitStatus
from hrms.models.employee import Employee
from hrms.services import gratuity, statistics
from hrms.services.audit import AuditService
from hrms.services.base import RecordRepository


def _snapshot(record: BenefitRecord) -> Dict[str, Any]:
    return {
        "years_of_service": record.years_of_service,
        "basic_salary": record.basic_salary,
        "gratuity_amount": record.gratuity_amount,
        "status": record.status,
    }


class BenefitService(RecordRepository[BenefitRecord]):
    def __init__(self, db: Session):
        super().__init__(db, BenefitRecord, "Benefit")
        self.audit = AuditService(db)

    def _apply_calculation(self, record: BenefitRecord):
        record.gratuity_amount = gratuity.calculate_gratuity(record.years_of_service, record.basic_salary)
        record.last_calculated = datetime.now(timezone.utc)

    def _require_accruing(self, record: BenefitRecord, action: str):
        if record.status != BenefitStatus.ACCRUING.value:
            raise InvalidStateTransitionError("benefit", record.status, action)

    def create(self, data: Dict[str, Any]) -> BenefitRecord:
        from hrms.services.employee_service import ensure_employee
        ensure_employee(self.db, data["employee_id"])

        record = BenefitRecord(
            employee_id=data["employee_id"],
            years_of_service=data["years_of_service"],
            basic_salary=data["basic_salary"],
            status=BenefitStatus.ACCRUING.value,
        )
        self._apply_calculation(record)
        self.db.add(record)
        self.db.flush()
        self.audit.log_action("create_benefit", "benefit", record.id, after_state=_snapshot(record))
        self.commit()
        self.db.refresh(record)
        self.log_info(f"Created benefit {record.id} for employee {record.employee_id}: gratuity {record.gratuity_amount}")
        return record

    def update(self, record_id: int, data: Dict[str, Any]) -> BenefitRecord:
        record = self.get(record_id)
        if not data:
            return record
        self._require_accruing(record, "update")
        before = _snapshot(record)
        for field, value in data.items():
            setattr(record, field, value)
        self._apply_calculation(record)
        self.audit.log_action("update_benefit", "benefit", record.id, before_state=before, after_state=_snapshot(record))
        self.commit()
        self.db.refresh(record)
        return record

    def recalculate(
        self,
        record_id: int,
        years_of_service: Optional[float] = None,
        basic_salary: Optional[float] = None,
        as_of: Optional[date] = None
    ) -> BenefitRecord:
        record = self.get(record_id)
        self._require_accruing(record, "recalculate")
        before = _snapshot(record)

        employee = record.employee
        if years_of_service is None:
            years_of_service = gratuity.years_of_service(employee.hire_date, as_of)
        if basic_salary is None:
            basic_salary = employee.salary

        record.years_of_service = years_of_service
        record.basic_salary = basic_salary
        self._apply_calculation(record)
        self.audit.log_action("recalculate_benefit", "benefit", record.id, before_state=before, after_state=_snapshot(record))
        self.commit()
        self.db.refresh(record)
        self.log_info(f"Recalculated benefit {record.id}: {before['gratuity_amount']} -> {record.gratuity_amount}")
        return record

    def payout(self, record_id: int) -> BenefitRecord:
        record = self.get(record_id)
        self._require_accruing(record, "pay out")
        before = _snapshot(record)
        record.status = BenefitStatus.PAID_OUT.value
        record.paid_out_at = datetime.now(timezone.utc)
        self.audit.log_action("payout_benefit", "benefit", record.id, before_state=before, after_state=_snapshot(record))
        self.commit()
        self.db.refresh(record)
        self.log_info(f"Benefit {record.id} paid out ({record.gratuity_amount})")
        return record

    def delete(self, record_id: int) -> None:
        record = self.get(record_id)
        self.audit.log_action("delete_benefit", "benefit", record.id, before_state=_snapshot(record))
        super().delete(record_id)

    def sync_salary(self, employee: Employee) -> int:
        """
        Re-sync basic salary on the employee's accruing records; paid-out records stay frozen.
        Changes are flushed, not committed: the caller commits them with its own edit.
        """
        records = self.db.query(BenefitRecord).filter(
            BenefitRecord.employee_id == employee.id,
            BenefitRecord.status == BenefitStatus.ACCRUING.value
        ).all()
        for record in records:
            before = _snapshot(record)
            record.basic_salary = employee.salary
            self._apply_calculation(record)
            self.audit.log_action(
                "recalculate_benefit", "benefit", record.id,
                details={"trigger": "salary_change"},
                before_state=before, after_state=_snapshot(record)
            )
        self.db.flush()
        return len(records)

    def summary(self) -> Dict[str, Any]:
        return summarize_benefits(self.list())


def summarize_benefits(records: List[BenefitRecord]) -> Dict[str, Any]:
    return {
        "total_records": len(records),
        "total_liability": statistics.total(records, "gratuity_amount"),
        "average_years_of_service": statistics.average(records, "years_of_service", ndigits=2),
        "accruing": statistics.count_where(records, "status", BenefitStatus.ACCRUING.value),
        "paid_out": statistics.count_where(records, "status", BenefitStatus.PAID_OUT.value),
        "by_service": statistics.band_counts(records, "years_of_service", gratuity.service_band, gratuity.SERVICE_BANDS),
        "by_amount": statistics.band_counts(records, "gratuity_amount", gratuity.amount_band, gratuity.AMOUNT_BANDS),
        "currency": settings.currency,
    }
