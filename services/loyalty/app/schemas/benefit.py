"""Pydantic schemas for plan benefits."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BenefitBase(BaseModel):
    plan_id: int
    clave: str = Field(..., min_length=1, max_length=50)
    valor: float = Field(..., ge=0, le=999999.99)
    dias_aplicables: Optional[str] = Field(None, max_length=20)
    observacion: Optional[str] = Field(None, max_length=200)


class BenefitCreate(BenefitBase):
    pass


class BenefitUpdate(BenefitBase):
    pass


class BenefitResponse(BenefitBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
