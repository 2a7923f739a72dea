"""Pydantic schemas for customer memberships and their status view."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MembershipBase(BaseModel):
    cod_cliente: int = Field(..., ge=0)
    plan_id: int
    fecha_inicio: datetime
    fecha_fin: Optional[datetime] = None
    id_suscripcion_mp: Optional[str] = Field(None, max_length=100)
    id_cliente_mp: Optional[str] = Field(None, max_length=100)
    meses_acumulacion_personalizado: Optional[int] = None


class MembershipCreate(MembershipBase):
    pass


class MembershipUpdate(MembershipBase):
    pass


class MembershipResponse(MembershipBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    estado: str


class MembershipStatusResponse(BaseModel):
    estado: str
    plan_id: int
    nombre_plan: str
    precio_mensual: float
    entradas_mensuales: int
    entradas_disponibles: int
    nivel: int
    beneficios: List[Optional[str]] = Field(default_factory=list)
