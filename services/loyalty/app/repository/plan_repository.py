"""Data access helpers for membership plans."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from app.models import MembershipPlan


def list_active_plans(db: Session) -> List[MembershipPlan]:
    return (
        db.query(MembershipPlan)
        .filter(MembershipPlan.activo.is_(True))
        .order_by(MembershipPlan.id)
        .all()
    )


def get_plan(db: Session, plan_id: int) -> Optional[MembershipPlan]:
    return db.query(MembershipPlan).filter(MembershipPlan.id == plan_id).first()


def get_active_plan(db: Session, plan_id: int) -> Optional[MembershipPlan]:
    return (
        db.query(MembershipPlan)
        .filter(MembershipPlan.id == plan_id, MembershipPlan.activo.is_(True))
        .first()
    )


def active_plan_name_exists(
    db: Session, nombre: str, *, exclude_id: Optional[int] = None
) -> bool:
    query = db.query(MembershipPlan.id).filter(
        MembershipPlan.nombre == nombre, MembershipPlan.activo.is_(True)
    )
    if exclude_id is not None:
        query = query.filter(MembershipPlan.id != exclude_id)
    return query.first() is not None


def create_plan(db: Session, plan: MembershipPlan) -> MembershipPlan:
    db.add(plan)
    db.flush()
    return plan


__all__ = [
    "active_plan_name_exists",
    "create_plan",
    "get_active_plan",
    "get_plan",
    "list_active_plans",
]
