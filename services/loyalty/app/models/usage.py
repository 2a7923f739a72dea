"""SQLAlchemy model for entry usages."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:  # pragma: no cover
    from app.models.balance import EntryBalance


class EntryUsage(Base):
    """A single entry consumed from a balance. Rows are never updated."""

    __tablename__ = "mem_entry_usage"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    entry_balance_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("mem_entry_balance.id"), nullable=False, index=True
    )
    fecha_uso: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    cod_complejo: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    cod_funcion: Mapped[int | None] = mapped_column(Integer, nullable=True)
    id_entrada: Mapped[int | None] = mapped_column(Integer, nullable=True)

    balance: Mapped["EntryBalance"] = relationship("EntryBalance", back_populates="usages")
