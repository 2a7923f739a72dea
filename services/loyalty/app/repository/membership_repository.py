"""Data access helpers for customer memberships."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session, joinedload, selectinload

from app.models import (
    MEMBERSHIP_STATUS_ACTIVE,
    CustomerMembership,
    MembershipPlan,
)


def list_active_memberships(db: Session) -> List[CustomerMembership]:
    return (
        db.query(CustomerMembership)
        .filter(CustomerMembership.estado == MEMBERSHIP_STATUS_ACTIVE)
        .order_by(CustomerMembership.id)
        .all()
    )


def get_active_membership(db: Session, membership_id: int) -> Optional[CustomerMembership]:
    return (
        db.query(CustomerMembership)
        .filter(
            CustomerMembership.id == membership_id,
            CustomerMembership.estado == MEMBERSHIP_STATUS_ACTIVE,
        )
        .first()
    )


def membership_exists(db: Session, membership_id: int) -> bool:
    return (
        db.query(CustomerMembership.id)
        .filter(CustomerMembership.id == membership_id)
        .first()
        is not None
    )


def active_membership_exists(
    db: Session,
    cod_cliente: int,
    plan_id: int,
    *,
    exclude_id: Optional[int] = None,
) -> bool:
    query = db.query(CustomerMembership.id).filter(
        CustomerMembership.cod_cliente == cod_cliente,
        CustomerMembership.plan_id == plan_id,
        CustomerMembership.estado == MEMBERSHIP_STATUS_ACTIVE,
    )
    if exclude_id is not None:
        query = query.filter(CustomerMembership.id != exclude_id)
    return query.first() is not None


def get_active_membership_for_customer(
    db: Session, cod_cliente: int
) -> Optional[CustomerMembership]:
    return (
        db.query(CustomerMembership)
        .options(
            joinedload(CustomerMembership.plan).selectinload(MembershipPlan.benefits),
        )
        .filter(
            CustomerMembership.cod_cliente == cod_cliente,
            CustomerMembership.estado == MEMBERSHIP_STATUS_ACTIVE,
        )
        .order_by(CustomerMembership.id)
        .first()
    )


def create_membership(db: Session, membership: CustomerMembership) -> CustomerMembership:
    db.add(membership)
    db.flush()
    return membership


__all__ = [
    "active_membership_exists",
    "create_membership",
    "get_active_membership",
    "get_active_membership_for_customer",
    "list_active_memberships",
    "membership_exists",
]
