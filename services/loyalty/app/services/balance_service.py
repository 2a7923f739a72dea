"""Entry balances: the per-period allotments that usages are consumed from."""

from __future__ import annotations

from app.core.errors import NotFoundError, ValidationError
from app.models import EntryBalance
from app.repository import balance_repository, membership_repository
from app.schemas import BalanceCreate, BalanceUpdate
from app.services.base import BaseService
from app.services.period_utils import ensure_utc

_MEMBERSHIP_NOT_FOUND = "La membresía especificada no existe."


class BalanceService(BaseService):
    def list_balances(self, membership_id: int) -> list[EntryBalance]:
        if not membership_repository.membership_exists(self.db, membership_id):
            raise NotFoundError(_MEMBERSHIP_NOT_FOUND)
        return balance_repository.list_balances_by_membership(self.db, membership_id)

    def create_balance(self, membership_id: int, balance_in: BalanceCreate) -> EntryBalance:
        if not membership_repository.membership_exists(self.db, membership_id):
            raise ValidationError(_MEMBERSHIP_NOT_FOUND)
        if balance_in.entradas_asignadas < 0:
            raise ValidationError("El número de entradas asignadas no puede ser negativo.")
        if balance_in.periodo is not None and balance_in.periodo <= 0:
            raise ValidationError("El período debe ser mayor a cero.")

        balance = EntryBalance(
            customer_membership_id=membership_id,
            periodo=balance_in.periodo,
            entradas_asignadas=balance_in.entradas_asignadas,
            entradas_usadas=0,
            fecha_vencimiento=ensure_utc(balance_in.fecha_vencimiento),
        )
        with self._transaction("Error al crear el saldo de entradas."):
            balance_repository.create_balance(self.db, balance)
        self.db.refresh(balance)
        return balance

    def update_balance(self, balance_id: int, balance_in: BalanceUpdate) -> EntryBalance:
        """Apply a partial update.

        ``entradas_usadas <= entradas_asignadas`` is deliberately not checked
        here; operators use this endpoint to correct counters by hand.
        """
        balance = balance_repository.get_balance(self.db, balance_id)
        if balance is None:
            raise NotFoundError("El saldo especificado no existe.")

        update_data = balance_in.model_dump(exclude_none=True)
        if update_data.get("entradas_asignadas", 0) < 0:
            raise ValidationError("Las entradas asignadas no pueden ser negativas.")
        if update_data.get("entradas_usadas", 0) < 0:
            raise ValidationError("Las entradas usadas no pueden ser negativas.")

        if not update_data:
            return balance
        if "fecha_vencimiento" in update_data:
            update_data["fecha_vencimiento"] = ensure_utc(update_data["fecha_vencimiento"])

        with self._transaction("Error al actualizar el saldo de entradas."):
            for field, value in update_data.items():
                setattr(balance, field, value)
            self.db.flush()
        self.db.refresh(balance)
        return balance


__all__ = ["BalanceService"]
