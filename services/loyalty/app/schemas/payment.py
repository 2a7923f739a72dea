"""Pydantic schemas for membership payments."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PaymentBase(BaseModel):
    customer_membership_id: int
    fecha_pago: datetime
    monto: float = Field(..., ge=0)
    estado: str = Field(..., min_length=1, max_length=50)
    referencia_externa: Optional[str] = Field(None, max_length=100)
    periodo: Optional[int] = None
    observaciones: Optional[str] = Field(None, max_length=200)


class PaymentCreate(PaymentBase):
    pass


class PaymentUpdate(PaymentBase):
    pass


class PaymentResponse(PaymentBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
