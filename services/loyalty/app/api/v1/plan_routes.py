"""API routes for membership plans."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas import DataResponse, ListResponse, PlanCreate, PlanResponse, PlanUpdate, envelope
from app.services import PlanService

router = APIRouter(prefix="/plans", tags=["plans"])


@router.get("", response_model=ListResponse[PlanResponse])
def list_plans(db: Session = Depends(get_db)):
    service = PlanService(db)
    return envelope(service.list_plans())


@router.get("/{plan_id}", response_model=DataResponse[PlanResponse])
def get_plan(plan_id: int, db: Session = Depends(get_db)):
    service = PlanService(db)
    return envelope(service.get_plan(plan_id))


@router.post("", response_model=DataResponse[PlanResponse], status_code=status.HTTP_201_CREATED)
def create_plan(plan_in: PlanCreate, db: Session = Depends(get_db)):
    service = PlanService(db)
    return envelope(service.create_plan(plan_in))


@router.put("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_plan(plan_id: int, plan_in: PlanUpdate, db: Session = Depends(get_db)):
    service = PlanService(db)
    service.update_plan(plan_id, plan_in)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_plan(plan_id: int, db: Session = Depends(get_db)):
    service = PlanService(db)
    service.delete_plan(plan_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
