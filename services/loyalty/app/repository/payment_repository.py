"""Database helpers for membership payment persistence."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from app.models import MembershipPayment


def list_payments(db: Session) -> List[MembershipPayment]:
    return db.query(MembershipPayment).order_by(MembershipPayment.id).all()


def get_payment(db: Session, payment_id: int) -> Optional[MembershipPayment]:
    return db.query(MembershipPayment).filter(MembershipPayment.id == payment_id).first()


def period_payment_exists(
    db: Session,
    membership_id: int,
    periodo: int,
    *,
    exclude_id: Optional[int] = None,
) -> bool:
    query = db.query(MembershipPayment.id).filter(
        MembershipPayment.customer_membership_id == membership_id,
        MembershipPayment.periodo == periodo,
    )
    if exclude_id is not None:
        query = query.filter(MembershipPayment.id != exclude_id)
    return query.first() is not None


def external_reference_exists(
    db: Session, referencia: str, *, exclude_id: Optional[int] = None
) -> bool:
    query = db.query(MembershipPayment.id).filter(
        MembershipPayment.referencia_externa == referencia
    )
    if exclude_id is not None:
        query = query.filter(MembershipPayment.id != exclude_id)
    return query.first() is not None


def create_payment(db: Session, payment: MembershipPayment) -> MembershipPayment:
    db.add(payment)
    db.flush()
    return payment


def delete_payment(db: Session, payment: MembershipPayment) -> None:
    db.delete(payment)


__all__ = [
    "create_payment",
    "delete_payment",
    "external_reference_exists",
    "get_payment",
    "list_payments",
    "period_payment_exists",
]
