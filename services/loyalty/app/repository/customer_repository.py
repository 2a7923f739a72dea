"""Lookups against the customer master table."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from app.models import Customer


def get_customer(db: Session, cod_cliente: int) -> Optional[Customer]:
    return db.get(Customer, cod_cliente)


__all__ = ["get_customer"]
