"""Read-only mapping of the customer master table."""

from __future__ import annotations

from sqlalchemy import BigInteger, Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class Customer(Base):
    """Customer master data owned by the box-office system.

    Only the columns this service reads are mapped; rows are never written here.
    """

    __tablename__ = "cliente"

    cod_cliente: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    nom_cliente: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    apellido: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(120), nullable=False, default="")
    habilitado: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
