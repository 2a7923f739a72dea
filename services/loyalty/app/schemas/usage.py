"""Pydantic schemas for entry usages."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class UsageCreate(BaseModel):
    fecha_uso: datetime
    cod_complejo: Optional[int] = None
    cod_funcion: Optional[int] = None
    id_entrada: Optional[int] = None


class UsageResponse(UsageCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    entry_balance_id: int
