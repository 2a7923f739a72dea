"""SQLAlchemy model for membership payments."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:  # pragma: no cover
    from app.models.membership import CustomerMembership


class MembershipPayment(Base):
    __tablename__ = "mem_membership_payment"
    __table_args__ = (
        UniqueConstraint(
            "customer_membership_id",
            "periodo",
            name="uq_mem_membership_payment_periodo",
        ),
        UniqueConstraint("referencia_externa", name="uq_mem_membership_payment_referencia"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    customer_membership_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("mem_customer_membership.id"), nullable=False, index=True
    )
    fecha_pago: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    monto: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    estado: Mapped[str] = mapped_column(String(50), nullable=False)
    referencia_externa: Mapped[str | None] = mapped_column(String(100), nullable=True)
    periodo: Mapped[int | None] = mapped_column(Integer, nullable=True)
    observaciones: Mapped[str | None] = mapped_column(String(200), nullable=True)

    membership: Mapped["CustomerMembership"] = relationship(
        "CustomerMembership", back_populates="payments"
    )
