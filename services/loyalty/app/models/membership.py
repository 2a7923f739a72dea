"""SQLAlchemy model for customer memberships."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:  # pragma: no cover
    from app.models.balance import EntryBalance
    from app.models.payment import MembershipPayment
    from app.models.plan import MembershipPlan

MEMBERSHIP_STATUS_ACTIVE = "ACTIVO"
MEMBERSHIP_STATUS_INACTIVE = "INACTIVO"


class CustomerMembership(Base):
    """A customer's subscription to a plan."""

    __tablename__ = "mem_customer_membership"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    cod_cliente: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("cliente.cod_cliente"), nullable=False, index=True
    )
    plan_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("mem_membership_plan.id"), nullable=False
    )
    fecha_inicio: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    fecha_fin: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    estado: Mapped[str] = mapped_column(
        String(20), nullable=False, default=MEMBERSHIP_STATUS_ACTIVE
    )
    id_suscripcion_mp: Mapped[str | None] = mapped_column(String(100), nullable=True)
    id_cliente_mp: Mapped[str | None] = mapped_column(String(100), nullable=True)
    meses_acumulacion_personalizado: Mapped[int | None] = mapped_column(
        Integer, nullable=True
    )

    plan: Mapped["MembershipPlan"] = relationship(
        "MembershipPlan", back_populates="memberships"
    )
    payments: Mapped[list["MembershipPayment"]] = relationship(
        "MembershipPayment", back_populates="membership"
    )
    balances: Mapped[list["EntryBalance"]] = relationship(
        "EntryBalance", back_populates="membership"
    )

    @property
    def is_active(self) -> bool:
        return self.estado == MEMBERSHIP_STATUS_ACTIVE

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return (
            "CustomerMembership(id={id}, cod_cliente={cliente}, plan_id={plan}, estado={estado!r})"
        ).format(id=self.id, cliente=self.cod_cliente, plan=self.plan_id, estado=self.estado)


# One ACTIVO membership per customer and plan.
Index(
    "uq_mem_customer_membership_activa",
    CustomerMembership.cod_cliente,
    CustomerMembership.plan_id,
    unique=True,
    postgresql_where=CustomerMembership.estado == MEMBERSHIP_STATUS_ACTIVE,
    sqlite_where=CustomerMembership.estado == MEMBERSHIP_STATUS_ACTIVE,
)
