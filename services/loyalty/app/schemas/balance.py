"""Pydantic schemas for entry balances."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


# Range checks on these fields live in BalanceService so callers get its messages.
class BalanceCreate(BaseModel):
    periodo: Optional[int] = None
    entradas_asignadas: int
    fecha_vencimiento: datetime


class BalanceUpdate(BaseModel):
    entradas_asignadas: Optional[int] = None
    entradas_usadas: Optional[int] = None
    fecha_vencimiento: Optional[datetime] = None


class BalanceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    customer_membership_id: int
    periodo: Optional[int] = None
    entradas_asignadas: int
    entradas_usadas: int
    fecha_vencimiento: datetime
