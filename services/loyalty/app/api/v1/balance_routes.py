"""API routes for entry balances and their usages."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas import (
    BalanceCreate,
    BalanceResponse,
    BalanceUpdate,
    DataResponse,
    ListResponse,
    UsageCreate,
    UsageResponse,
    envelope,
)
from app.services import BalanceService, UsageService

router = APIRouter(tags=["balances"])


@router.get("/memberships/{membership_id}/balances", response_model=ListResponse[BalanceResponse])
def list_balances(membership_id: int, db: Session = Depends(get_db)):
    service = BalanceService(db)
    return envelope(service.list_balances(membership_id))


@router.post(
    "/memberships/{membership_id}/balances",
    response_model=DataResponse[BalanceResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_balance(membership_id: int, balance_in: BalanceCreate, db: Session = Depends(get_db)):
    service = BalanceService(db)
    return envelope(service.create_balance(membership_id, balance_in))


@router.put("/balances/{balance_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_balance(balance_id: int, balance_in: BalanceUpdate, db: Session = Depends(get_db)):
    service = BalanceService(db)
    service.update_balance(balance_id, balance_in)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/balances/{balance_id}/usages", response_model=ListResponse[UsageResponse])
def list_usages(balance_id: int, db: Session = Depends(get_db)):
    service = UsageService(db)
    return envelope(service.list_usages(balance_id))


@router.post(
    "/balances/{balance_id}/usages",
    response_model=DataResponse[UsageResponse],
    status_code=status.HTTP_201_CREATED,
)
def record_usage(balance_id: int, usage_in: UsageCreate, db: Session = Depends(get_db)):
    service = UsageService(db)
    return envelope(service.record_usage(balance_id, usage_in))
