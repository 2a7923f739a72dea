"""SQLAlchemy model for plan benefits."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:  # pragma: no cover
    from app.models.plan import MembershipPlan


class MembershipBenefit(Base):
    __tablename__ = "mem_membership_benefit"
    __table_args__ = (
        UniqueConstraint("plan_id", "clave", name="uq_mem_membership_benefit_plan_clave"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    plan_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("mem_membership_plan.id"), nullable=False, index=True
    )
    clave: Mapped[str] = mapped_column(String(50), nullable=False)
    valor: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False, default=0)
    dias_aplicables: Mapped[str | None] = mapped_column(String(20), nullable=True)
    observacion: Mapped[str | None] = mapped_column(String(200), nullable=True)

    plan: Mapped["MembershipPlan"] = relationship("MembershipPlan", back_populates="benefits")
