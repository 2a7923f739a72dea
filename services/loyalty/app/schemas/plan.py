"""Pydantic schemas for membership plans."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PlanBase(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=100)
    precio_mensual: float = Field(..., ge=0, le=999999.99)
    entradas_mensuales: int = Field(..., ge=0)
    meses_acumulacion_max: int = Field(..., ge=0)
    nivel: int = Field(..., ge=0)
    activo: bool = True


class PlanCreate(PlanBase):
    pass


class PlanUpdate(PlanBase):
    pass


class PlanResponse(PlanBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    fecha_creacion: datetime
