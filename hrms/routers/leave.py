from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from typing import Dict, List, Optional

from hrms.core.config import settings
from hrms.database import get_db
from hrms.models.leave_request import LeaveStatus
from hrms.schemas.leave import (
    LeaveRequestCreate, LeaveRequestUpdate, LeaveRequestResponse,
    LeaveDecision, LeaveBalanceResponse,
)
from hrms.services.leave_service import LeaveService

router = APIRouter(prefix="/leaves", tags=["Leave"])


@router.get("", response_model=List[LeaveRequestResponse])
def list_leave_requests(
    employee_id: Optional[int] = None,
    status: Optional[LeaveStatus] = None,
    leave_type: Optional[str] = None,
    db: Session = Depends(get_db)
):
    return LeaveService(db).list_requests(
        employee_id=employee_id,
        status=status.value if status else None,
        leave_type=leave_type
    )


@router.post("", response_model=LeaveRequestResponse, status_code=status.HTTP_201_CREATED)
def submit_leave_request(request: LeaveRequestCreate, db: Session = Depends(get_db)):
    """Submit a leave request. It starts pending; the day count is derived from the dates."""
    return LeaveService(db).submit(request.model_dump())


@router.get("/allotments", response_model=Dict[str, int])
def get_leave_allotments():
    return settings.leave_allotments


@router.get("/balance/{employee_id}", response_model=List[LeaveBalanceResponse])
def get_leave_balance(employee_id: int, db: Session = Depends(get_db)):
    """Used and remaining days per leave type, derived from approved requests."""
    return LeaveService(db).balances_for(employee_id)


@router.get("/{leave_id}", response_model=LeaveRequestResponse)
def get_leave_request(leave_id: int, db: Session = Depends(get_db)):
    return LeaveService(db).get(leave_id)


@router.put("/{leave_id}", response_model=LeaveRequestResponse)
def update_leave_request(leave_id: int, request: LeaveRequestUpdate, db: Session = Depends(get_db)):
    return LeaveService(db).update(leave_id, request.model_dump(exclude_unset=True))


@router.post("/{leave_id}/approve", response_model=LeaveRequestResponse)
def approve_leave_request(
    leave_id: int,
    decision: Optional[LeaveDecision] = Body(None),
    db: Session = Depends(get_db)
):
    return LeaveService(db).approve(leave_id, decision.comment if decision else None)


@router.post("/{leave_id}/reject", response_model=LeaveRequestResponse)
def reject_leave_request(
    leave_id: int,
    decision: Optional[LeaveDecision] = Body(None),
    db: Session = Depends(get_db)
):
    return LeaveService(db).reject(leave_id, decision.comment if decision else None)


@router.delete("/{leave_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_leave_request(leave_id: int, db: Session = Depends(get_db)):
    LeaveService(db).delete(leave_id)
