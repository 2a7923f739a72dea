"""Data access helpers for plan benefits."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from app.models import MembershipBenefit


def list_benefits(db: Session) -> List[MembershipBenefit]:
    return db.query(MembershipBenefit).order_by(MembershipBenefit.id).all()


def get_benefit(db: Session, benefit_id: int) -> Optional[MembershipBenefit]:
    return db.query(MembershipBenefit).filter(MembershipBenefit.id == benefit_id).first()


def benefit_key_exists(
    db: Session, plan_id: int, clave: str, *, exclude_id: Optional[int] = None
) -> bool:
    query = db.query(MembershipBenefit.id).filter(
        MembershipBenefit.plan_id == plan_id, MembershipBenefit.clave == clave
    )
    if exclude_id is not None:
        query = query.filter(MembershipBenefit.id != exclude_id)
    return query.first() is not None


def create_benefit(db: Session, benefit: MembershipBenefit) -> MembershipBenefit:
    db.add(benefit)
    db.flush()
    return benefit


def delete_benefit(db: Session, benefit: MembershipBenefit) -> None:
    db.delete(benefit)


__all__ = [
    "benefit_key_exists",
    "create_benefit",
    "delete_benefit",
    "get_benefit",
    "list_benefits",
]
