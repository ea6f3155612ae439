from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hrms.database import get_db
from hrms.schemas.company import CompanySettingsUpdate, CompanySettingsResponse
from hrms.services.company_service import CompanySettingsService

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("/company", response_model=CompanySettingsResponse)
def get_company_settings(db: Session = Depends(get_db)):
    return CompanySettingsService(db).get()


@router.put("/company", response_model=CompanySettingsResponse)
def update_company_settings(settings_in: CompanySettingsUpdate, db: Session = Depends(get_db)):
    return CompanySettingsService(db).update(settings_in.model_dump(exclude_unset=True))
