"""API routes for membership payments."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas import (
    DataResponse,
    ListResponse,
    PaymentCreate,
    PaymentResponse,
    PaymentUpdate,
    envelope,
)
from app.services import PaymentService

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("", response_model=ListResponse[PaymentResponse])
def list_payments(db: Session = Depends(get_db)):
    service = PaymentService(db)
    return envelope(service.list_payments())


@router.get("/{payment_id}", response_model=DataResponse[PaymentResponse])
def get_payment(payment_id: int, db: Session = Depends(get_db)):
    service = PaymentService(db)
    return envelope(service.get_payment(payment_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=DataResponse[PaymentResponse],
)
def create_payment(payload: PaymentCreate, db: Session = Depends(get_db)):
    service = PaymentService(db)
    return envelope(service.create_payment(payload))


@router.put("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_payment(payment_id: int, payload: PaymentUpdate, db: Session = Depends(get_db)):
    service = PaymentService(db)
    service.update_payment(payment_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_payment(payment_id: int, db: Session = Depends(get_db)):
    service = PaymentService(db)
    service.delete_payment(payment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
