"""SQLAlchemy model for per-period entry balances."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:  # pragma: no cover
    from app.models.membership import CustomerMembership
    from app.models.usage import EntryUsage


class EntryBalance(Base):
    """Entries assigned to a membership for a period, and how many were used."""

    __tablename__ = "mem_entry_balance"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    customer_membership_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("mem_customer_membership.id"), nullable=False, index=True
    )
    periodo: Mapped[int | None] = mapped_column(Integer, nullable=True)
    entradas_asignadas: Mapped[int] = mapped_column(Integer, nullable=False)
    entradas_usadas: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    fecha_vencimiento: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    membership: Mapped["CustomerMembership"] = relationship(
        "CustomerMembership", back_populates="balances"
    )
    usages: Mapped[list["EntryUsage"]] = relationship(
        "EntryUsage", back_populates="balance", order_by="EntryUsage.id"
    )
