"""SQLAlchemy model for membership plans."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:  # pragma: no cover
    from app.models.benefit import MembershipBenefit
    from app.models.membership import CustomerMembership


class MembershipPlan(Base):
    """A membership tier: price, monthly entry allotment and benefits."""

    __tablename__ = "mem_membership_plan"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    nombre: Mapped[str] = mapped_column(String(100), nullable=False)
    precio_mensual: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    entradas_mensuales: Mapped[int] = mapped_column(Integer, nullable=False)
    meses_acumulacion_max: Mapped[int] = mapped_column(Integer, nullable=False)
    nivel: Mapped[int] = mapped_column(Integer, nullable=False)
    activo: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    fecha_creacion: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    benefits: Mapped[list["MembershipBenefit"]] = relationship(
        "MembershipBenefit", back_populates="plan", order_by="MembershipBenefit.id"
    )
    memberships: Mapped[list["CustomerMembership"]] = relationship(
        "CustomerMembership", back_populates="plan"
    )

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return "MembershipPlan(id={id}, nombre={nombre!r}, activo={activo})".format(
            id=self.id, nombre=self.nombre, activo=self.activo
        )


# Only one active plan may carry a given name.
Index(
    "uq_mem_membership_plan_nombre_activo",
    MembershipPlan.nombre,
    unique=True,
    postgresql_where=MembershipPlan.activo.is_(True),
    sqlite_where=MembershipPlan.activo.is_(True),
)
