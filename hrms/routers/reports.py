from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from hrms.core.exceptions import InvalidDateRangeError
from hrms.database import get_db
from hrms.services import report_service

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/expenses")
def get_expense_report(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    db: Session = Depends(get_db)
):
    if start_date and end_date and end_date < start_date:
        raise InvalidDateRangeError(start_date, end_date)
    return report_service.expense_report(db, start_date, end_date)


@router.get("/assets")
def get_asset_report(db: Session = Depends(get_db)):
    return report_service.asset_report(db)


@router.get("/benefits")
def get_benefit_report(db: Session = Depends(get_db)):
    return report_service.benefit_report(db)


@router.get("/payroll")
def get_payroll_report(
    month: Optional[int] = Query(None, ge=1, le=12),
    year: Optional[int] = None,
    db: Session = Depends(get_db)
):
    return report_service.payroll_report(db, month, year)


@router.get("/disciplinary")
def get_disciplinary_report(db: Session = Depends(get_db)):
    return report_service.disciplinary_report(db)


@router.get("/health-insurance")
def get_health_insurance_report(db: Session = Depends(get_db)):
    return report_service.health_insurance_report(db)


@router.get("/compliance")
def get_compliance_report(db: Session = Depends(get_db)):
    return report_service.compliance_report(db)


@router.get("/performance")
def get_performance_report(db: Session = Depends(get_db)):
    return report_service.performance_report(db)


@router.get("/attendance")
def get_attendance_report(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    db: Session = Depends(get_db)
):
    if start_date and end_date and end_date < start_date:
        raise InvalidDateRangeError(start_date, end_date)
    return report_service.attendance_report(db, start_date, end_date)


@router.get("/expiring-documents")
def get_expiring_documents(within_days: int = Query(30, ge=0, le=365), db: Session = Depends(get_db)):
    return report_service.expiring_documents_report(db, within_days)


@router.get("/overall")
def get_overall_report(db: Session = Depends(get_db)):
    return report_service.overall_report(db)


@router.get("/dashboard")
def get_dashboard(db: Session = Depends(get_db)):
    return report_service.dashboard(db)
