"""API routes for customer memberships."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas import (
    CountedListResponse,
    DataResponse,
    MembershipCreate,
    MembershipResponse,
    MembershipStatusResponse,
    MembershipUpdate,
    envelope,
)
from app.services import MembershipService, MembershipStatusService

router = APIRouter(prefix="/memberships", tags=["memberships"])


@router.get("", response_model=CountedListResponse[MembershipResponse])
def list_memberships(db: Session = Depends(get_db)):
    service = MembershipService(db)
    return envelope(service.list_memberships(), with_count=True)


@router.post(
    "", response_model=DataResponse[MembershipResponse], status_code=status.HTTP_201_CREATED
)
def create_membership(membership_in: MembershipCreate, db: Session = Depends(get_db)):
    service = MembershipService(db)
    return envelope(service.create_membership(membership_in))


@router.get("/status/{cod_cliente}", response_model=DataResponse[MembershipStatusResponse])
def get_membership_status(cod_cliente: str, db: Session = Depends(get_db)):
    service = MembershipStatusService(db)
    return envelope(service.get_status(cod_cliente))


@router.get(
    "/customer/{cod_cliente}/status",
    response_model=DataResponse[MembershipStatusResponse],
)
def get_customer_membership_status(cod_cliente: str, db: Session = Depends(get_db)):
    service = MembershipStatusService(db)
    return envelope(service.get_status(cod_cliente))


@router.get("/{membership_id}", response_model=DataResponse[MembershipResponse])
def get_membership(membership_id: int, db: Session = Depends(get_db)):
    service = MembershipService(db)
    return envelope(service.get_membership(membership_id))


@router.put("/{membership_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_membership(
    membership_id: int, membership_in: MembershipUpdate, db: Session = Depends(get_db)
):
    service = MembershipService(db)
    service.update_membership(membership_id, membership_in)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{membership_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_membership(membership_id: int, db: Session = Depends(get_db)):
    service = MembershipService(db)
    service.deactivate_membership(membership_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
