"""Data access helpers for entry balances and usages."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models import EntryBalance, EntryUsage


def list_balances_by_membership(db: Session, membership_id: int) -> List[EntryBalance]:
    return (
        db.query(EntryBalance)
        .filter(EntryBalance.customer_membership_id == membership_id)
        .order_by(EntryBalance.id)
        .all()
    )


def get_balance(db: Session, balance_id: int) -> Optional[EntryBalance]:
    return db.query(EntryBalance).filter(EntryBalance.id == balance_id).first()


def get_balance_for_update(db: Session, balance_id: int) -> Optional[EntryBalance]:
    """Load a balance holding a row lock until the transaction ends."""

    return (
        db.query(EntryBalance)
        .filter(EntryBalance.id == balance_id)
        .with_for_update()
        .first()
    )


def sum_used_entries(db: Session, membership_id: int, periodo: int) -> int:
    total = (
        db.query(func.coalesce(func.sum(EntryBalance.entradas_usadas), 0))
        .filter(
            EntryBalance.customer_membership_id == membership_id,
            EntryBalance.periodo == periodo,
        )
        .scalar()
    )
    return int(total or 0)


def create_balance(db: Session, balance: EntryBalance) -> EntryBalance:
    db.add(balance)
    db.flush()
    return balance


def list_usages_by_balance(db: Session, balance_id: int) -> List[EntryUsage]:
    return (
        db.query(EntryUsage)
        .filter(EntryUsage.entry_balance_id == balance_id)
        .order_by(EntryUsage.id)
        .all()
    )


def create_usage(db: Session, usage: EntryUsage) -> EntryUsage:
    db.add(usage)
    db.flush()
    return usage


__all__ = [
    "create_balance",
    "create_usage",
    "get_balance",
    "get_balance_for_update",
    "list_balances_by_membership",
    "list_usages_by_balance",
    "sum_used_entries",
]
