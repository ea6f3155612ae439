from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional

from hrms.database import get_db
from hrms.schemas.benefit import (
    BenefitCreate, BenefitUpdate, BenefitResponse, BenefitRecalculateRequest,
    BenefitSummaryResponse, GratuityQuote, GratuityQuoteResponse,
)
from hrms.services import gratuity
from hrms.services.benefit_service import BenefitService

router = APIRouter(prefix="/benefits", tags=["Benefits & Gratuity"])


@router.get("", response_model=List[BenefitResponse])
def list_benefits(employee_id: Optional[int] = None, status: Optional[str] = None, db: Session = Depends(get_db)):
    return BenefitService(db).list(employee_id=employee_id, status=status)


@router.post("", response_model=BenefitResponse, status_code=status.HTTP_201_CREATED)
def create_benefit(benefit_in: BenefitCreate, db: Session = Depends(get_db)):
    """Create an accruing gratuity record; the amount is computed, never supplied."""
    return BenefitService(db).create(benefit_in.model_dump())


@router.get("/summary", response_model=BenefitSummaryResponse)
def get_benefit_summary(db: Session = Depends(get_db)):
    return BenefitService(db).summary()


@router.post("/calculate", response_model=GratuityQuoteResponse)
def quote_gratuity(quote: GratuityQuote):
    """Preview the gratuity for given inputs without persisting anything."""
    return GratuityQuoteResponse(
        years_of_service=quote.years_of_service,
        basic_salary=quote.basic_salary,
        gratuity_amount=gratuity.calculate_gratuity(quote.years_of_service, quote.basic_salary),
    )


@router.get("/{benefit_id}", response_model=BenefitResponse)
def get_benefit(benefit_id: int, db: Session = Depends(get_db)):
    return BenefitService(db).get(benefit_id)


@router.put("/{benefit_id}", response_model=BenefitResponse)
def update_benefit(benefit_id: int, benefit_in: BenefitUpdate, db: Session = Depends(get_db)):
    return BenefitService(db).update(benefit_id, benefit_in.model_dump(exclude_unset=True))


@router.post("/{benefit_id}/recalculate", response_model=BenefitResponse)
def recalculate_benefit(
    benefit_id: int,
    request: Optional[BenefitRecalculateRequest] = Body(None),
    db: Session = Depends(get_db)
):
    request = request or BenefitRecalculateRequest()
    return BenefitService(db).recalculate(
        benefit_id,
        years_of_service=request.years_of_service,
        basic_salary=request.basic_salary,
        as_of=request.as_of,
    )


@router.post("/{benefit_id}/payout", response_model=BenefitResponse)
def payout_benefit(benefit_id: int, db: Session = Depends(get_db)):
    """Record the end-of-service payout. Irreversible."""
    return BenefitService(db).payout(benefit_id)


@router.delete("/{benefit_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_benefit(benefit_id: int, db: Session = Depends(get_db)):
    BenefitService(db).delete(benefit_id)
