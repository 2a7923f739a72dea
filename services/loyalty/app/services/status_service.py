"""Read-only entitlement view for a customer's active membership."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.core.errors import NotFoundError, ValidationError
from app.repository import balance_repository, membership_repository
from app.schemas import MembershipStatusResponse
from app.services.base import BaseService
from app.services.period_utils import current_period, ensure_utc, utcnow

logger = logging.getLogger(__name__)

# Plain decimal notation only, no exponent; at most 29 integer digits.
_CUSTOMER_CODE = re.compile(r"[+-]?\d{1,29}(?:\.\d{1,28})?")
_BIGINT_MIN = -(2**63)
_BIGINT_MAX = 2**63 - 1


def parse_customer_code(raw: str) -> Decimal:
    """Parse a customer code the way the box office writes it (``"1024"``, ``"1024.0"``)."""
    text = raw.strip()
    if not _CUSTOMER_CODE.fullmatch(text):
        raise ValidationError("CodCliente inválido.")
    return Decimal(text)


def _as_customer_key(code: Decimal) -> Optional[int]:
    """Return the integer key ``code`` could match, or None when no row can."""
    if code != code.to_integral_value():
        return None
    key = int(code)
    if not _BIGINT_MIN <= key <= _BIGINT_MAX:
        return None
    return key


class MembershipStatusService(BaseService):
    """Resolve a customer's active membership and the entries left this month.

    Nothing is written: the view is computed from the membership, its plan and
    the balances of the current period on every call.
    """

    def get_status(
        self, cod_cliente: str, *, now: Optional[datetime] = None
    ) -> MembershipStatusResponse:
        code = parse_customer_code(cod_cliente)
        now = ensure_utc(now) if now is not None else utcnow()

        membership = None
        key = _as_customer_key(code)
        if key is not None:
            membership = membership_repository.get_active_membership_for_customer(
                self.db, key
            )
        if membership is None:
            raise NotFoundError("Cliente sin membresía activa.")

        # ACTIVO memberships are not swept when they expire, so check the date here
        if membership.fecha_fin is not None and ensure_utc(membership.fecha_fin) < now:
            raise NotFoundError("La membresía ha expirado.")

        plan = membership.plan
        periodo = current_period(now)
        used = balance_repository.sum_used_entries(self.db, membership.id, periodo)

        logger.debug(
            "Status for customer %s: plan=%s periodo=%s used=%s",
            code,
            plan.id,
            periodo,
            used,
        )
        return MembershipStatusResponse(
            estado=membership.estado,
            plan_id=plan.id,
            nombre_plan=plan.nombre,
            precio_mensual=plan.precio_mensual,
            entradas_mensuales=plan.entradas_mensuales,
            entradas_disponibles=plan.entradas_mensuales - used,
            nivel=plan.nivel,
            beneficios=[benefit.observacion for benefit in plan.benefits],
        )


__all__ = ["MembershipStatusService", "parse_customer_code"]
