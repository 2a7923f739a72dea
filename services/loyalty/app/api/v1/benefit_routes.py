"""API routes for plan benefits."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas import (
    BenefitCreate,
    BenefitResponse,
    BenefitUpdate,
    DataResponse,
    ListResponse,
    envelope,
)
from app.services import BenefitService

router = APIRouter(prefix="/benefits", tags=["benefits"])


@router.get("", response_model=ListResponse[BenefitResponse])
def list_benefits(db: Session = Depends(get_db)):
    service = BenefitService(db)
    return envelope(service.list_benefits())


@router.get("/{benefit_id}", response_model=DataResponse[BenefitResponse])
def get_benefit(benefit_id: int, db: Session = Depends(get_db)):
    service = BenefitService(db)
    return envelope(service.get_benefit(benefit_id))


@router.post(
    "", response_model=DataResponse[BenefitResponse], status_code=status.HTTP_201_CREATED
)
def create_benefit(benefit_in: BenefitCreate, db: Session = Depends(get_db)):
    service = BenefitService(db)
    return envelope(service.create_benefit(benefit_in))


@router.put("/{benefit_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_benefit(benefit_id: int, benefit_in: BenefitUpdate, db: Session = Depends(get_db)):
    service = BenefitService(db)
    service.update_benefit(benefit_id, benefit_in)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{benefit_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_benefit(benefit_id: int, db: Session = Depends(get_db)):
    service = BenefitService(db)
    service.delete_benefit(benefit_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
