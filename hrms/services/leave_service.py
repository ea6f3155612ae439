"""
Leave Service Layer

LeaveRequest.status is a small state machine:
    submit -> pending -> approve -> approved
                      -> reject  -> rejected
Nothing moves a request back to pending. Day counts are always derived
from the date range.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from hrms.core.exceptions import InvalidStateTransitionError
from hrms.models.leave_request import LeaveRequest, LeaveStatus
from hrms.services import leave_balance
from hrms.services.audit import AuditService
from hrms.services.base import RecordRepository
from hrms.services.employee_service import ensure_employee


def _snapshot(leave: LeaveRequest) -> Dict[str, Any]:
    return {
        "leave_type": leave.leave_type,
        "start_date": leave.start_date,
        "end_date": leave.end_date,
        "days": leave.days,
        "status": leave.status,
    }


class LeaveService(RecordRepository[LeaveRequest]):
    def __init__(self, db: Session):
        super().__init__(db, LeaveRequest, "Leave request")
        self.audit = AuditService(db)

    def list_requests(
        self,
        employee_id: Optional[int] = None,
        status: Optional[str] = None,
        leave_type: Optional[str] = None
    ) -> List[LeaveRequest]:
        return self.list(
            order_by=LeaveRequest.created_at.desc(),
            employee_id=employee_id,
            status=status,
            leave_type=leave_type,
        )

    def submit(self, data: Dict[str, Any]) -> LeaveRequest:
        ensure_employee(self.db, data["employee_id"])
        days = leave_balance.day_span(data["start_date"], data["end_date"])

        leave = LeaveRequest(
            employee_id=data["employee_id"],
            leave_type=data["leave_type"],
            start_date=data["start_date"],
            end_date=data["end_date"],
            days=days,
            reason=data.get("reason"),
            status=LeaveStatus.PENDING.value,
        )
        self.db.add(leave)
        self.db.flush()
        self.audit.log_action("submit_leave", "leave_request", leave.id, after_state=_snapshot(leave))
        self.commit()
        self.db.refresh(leave)
        self.log_info(f"Leave request {leave.id} submitted: {leave.leave_type}, {days} day(s)")
        return leave

    def update(self, record_id: int, data: Dict[str, Any]) -> LeaveRequest:
        leave = self.get(record_id)
        if not data:
            return leave
        if leave.status != LeaveStatus.PENDING.value:
            raise InvalidStateTransitionError("leave request", leave.status, "edit")

        before = _snapshot(leave)
        start = data.get("start_date", leave.start_date)
        end = data.get("end_date", leave.end_date)
        leave.days = leave_balance.day_span(start, end)
        for field, value in data.items():
            setattr(leave, field, value)

        self.audit.log_action("update_leave", "leave_request", leave.id, before_state=before, after_state=_snapshot(leave))
        self.commit()
        self.db.refresh(leave)
        return leave

    def _decide(self, record_id: int, target: LeaveStatus, action: str, comment: Optional[str]) -> LeaveRequest:
        leave = self.get(record_id)
        if leave.status != LeaveStatus.PENDING.value:
            self.log_warning(f"Rejected {action} of leave request {leave.id} in status {leave.status}")
            raise InvalidStateTransitionError("leave request", leave.status, action)

        before = _snapshot(leave)
        leave.status = target.value
        leave.decided_at = datetime.now(timezone.utc)
        leave.decision_comment = comment
        self.audit.log_action(
            f"{action}_leave", "leave_request", leave.id,
            details={"employee_id": leave.employee_id, "comment": comment},
            before_state=before, after_state=_snapshot(leave)
        )
        self.commit()
        self.db.refresh(leave)
        self.log_info(f"Leave request {leave.id} {target.value}")
        return leave

    def approve(self, record_id: int, comment: Optional[str] = None) -> LeaveRequest:
        return self._decide(record_id, LeaveStatus.APPROVED, "approve", comment)

    def reject(self, record_id: int, comment: Optional[str] = None) -> LeaveRequest:
        return self._decide(record_id, LeaveStatus.REJECTED, "reject", comment)

    def delete(self, record_id: int) -> None:
        leave = self.get(record_id)
        self.audit.log_action("delete_leave", "leave_request", leave.id, before_state=_snapshot(leave))
        super().delete(record_id)

    def balances_for(self, employee_id: int) -> List[Dict[str, Any]]:
        ensure_employee(self.db, employee_id)
        requests = self.list(employee_id=employee_id, status=LeaveStatus.APPROVED.value)
        return leave_balance.balances(requests)
