"""Entry consumption against a balance.

Recording a usage inserts the usage row and increments the balance's used
counter inside one transaction; if either write fails both are rolled back.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from app.core.errors import NotFoundError, ValidationError
from app.models import EntryBalance, EntryUsage
from app.repository import balance_repository
from app.schemas import UsageCreate
from app.services.base import BaseService
from app.services.period_utils import ensure_utc, utcnow

logger = logging.getLogger(__name__)

_BALANCE_NOT_FOUND = "El saldo no existe."
_MEMBERSHIP_INACTIVE = "La membresía asociada no existe o está inactiva."


class UsageService(BaseService):
    def _ensure_active_membership(self, balance: EntryBalance) -> None:
        membership = balance.membership
        if membership is None or not membership.is_active:
            raise ValidationError(_MEMBERSHIP_INACTIVE)

    def list_usages(self, balance_id: int) -> list[EntryUsage]:
        balance = balance_repository.get_balance(self.db, balance_id)
        if balance is None:
            raise NotFoundError(_BALANCE_NOT_FOUND)
        self._ensure_active_membership(balance)
        return balance_repository.list_usages_by_balance(self.db, balance_id)

    def record_usage(
        self,
        balance_id: int,
        usage_in: UsageCreate,
        *,
        now: Optional[datetime] = None,
    ) -> EntryUsage:
        now = ensure_utc(now) if now is not None else utcnow()
        try:
            usage = self._consume(balance_id, usage_in, now)
        except Exception:
            # Release the row lock taken by _consume before reporting the failure
            self.db.rollback()
            raise
        self.db.refresh(usage)
        logger.info(
            "Entry used on balance %s (usage %s, ticket %s)",
            balance_id,
            usage.id,
            usage.id_entrada,
        )
        return usage

    def _consume(self, balance_id: int, usage_in: UsageCreate, now: datetime) -> EntryUsage:
        balance = balance_repository.get_balance_for_update(self.db, balance_id)
        if balance is None:
            raise NotFoundError(_BALANCE_NOT_FOUND)

        self._ensure_active_membership(balance)

        if ensure_utc(balance.fecha_vencimiento) < now:
            logger.warning("Rejected usage on expired balance %s", balance_id)
            raise ValidationError("El saldo está vencido.")

        if balance.entradas_usadas >= balance.entradas_asignadas:
            logger.warning("Rejected usage on exhausted balance %s", balance_id)
            raise ValidationError("No hay entradas disponibles en este saldo.")

        if ensure_utc(usage_in.fecha_uso) > now:
            raise ValidationError("La FechaUso no puede ser futura.")

        usage = EntryUsage(entry_balance_id=balance.id, **usage_in.model_dump())
        usage.fecha_uso = ensure_utc(usage.fecha_uso)
        with self._transaction("Error al registrar el uso de la entrada."):
            balance_repository.create_usage(self.db, usage)
            balance.entradas_usadas += 1
            self.db.flush()
        return usage


__all__ = ["UsageService"]
