"""Business logic for the customer membership lifecycle."""

from __future__ import annotations

import logging
from typing import Optional

from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.models import (
    MEMBERSHIP_STATUS_ACTIVE,
    MEMBERSHIP_STATUS_INACTIVE,
    CustomerMembership,
)
from app.repository import customer_repository, membership_repository, plan_repository
from app.schemas import MembershipCreate, MembershipUpdate
from app.services.base import BaseService
from app.services.period_utils import ensure_utc

logger = logging.getLogger(__name__)

_DUPLICATE_ON_CREATE = "Ya existe una membresía activa para este cliente y plan."
_DUPLICATE_ON_UPDATE = "Ya existe otra membresía activa para este cliente y plan."


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    return value or None


def _membership_values(membership_in: MembershipCreate | MembershipUpdate) -> dict:
    values = membership_in.model_dump()
    values["id_suscripcion_mp"] = _blank_to_none(values["id_suscripcion_mp"])
    values["id_cliente_mp"] = _blank_to_none(values["id_cliente_mp"])
    values["fecha_inicio"] = ensure_utc(values["fecha_inicio"])
    if values["fecha_fin"] is not None:
        values["fecha_fin"] = ensure_utc(values["fecha_fin"])
    # 0 means "use the plan's accumulation limit"
    values["meses_acumulacion_personalizado"] = (
        values["meses_acumulacion_personalizado"] or None
    )
    return values


class MembershipService(BaseService):
    """Service layer encapsulating membership operations."""

    def _validate_references(self, membership_in: MembershipCreate | MembershipUpdate) -> None:
        if customer_repository.get_customer(self.db, membership_in.cod_cliente) is None:
            raise ValidationError("El cliente especificado no existe.")

        plan = plan_repository.get_plan(self.db, membership_in.plan_id)
        if plan is None:
            raise ValidationError("El plan especificado no existe.")
        if not plan.activo:
            raise ValidationError("El plan especificado está inactivo.")

    @staticmethod
    def _validate_dates(membership_in: MembershipCreate | MembershipUpdate) -> None:
        if (
            membership_in.fecha_fin is not None
            and ensure_utc(membership_in.fecha_inicio) > ensure_utc(membership_in.fecha_fin)
        ):
            raise ValidationError("La fecha de inicio debe ser anterior a la fecha de fin.")

    def _get_active(self, membership_id: int, message: str) -> CustomerMembership:
        membership = membership_repository.get_active_membership(self.db, membership_id)
        if membership is None:
            raise NotFoundError(message)
        return membership

    def list_memberships(self) -> list[CustomerMembership]:
        return membership_repository.list_active_memberships(self.db)

    def get_membership(self, membership_id: int) -> CustomerMembership:
        return self._get_active(membership_id, "Membresía no encontrada o inactiva.")

    def create_membership(self, membership_in: MembershipCreate) -> CustomerMembership:
        self._validate_references(membership_in)
        if membership_repository.active_membership_exists(
            self.db, membership_in.cod_cliente, membership_in.plan_id
        ):
            raise ConflictError(_DUPLICATE_ON_CREATE)
        self._validate_dates(membership_in)

        membership = CustomerMembership(
            **_membership_values(membership_in), estado=MEMBERSHIP_STATUS_ACTIVE
        )
        with self._transaction(
            "Error interno del servidor al crear la membresía.",
            conflict_message=_DUPLICATE_ON_CREATE,
        ):
            membership_repository.create_membership(self.db, membership)
        self.db.refresh(membership)
        logger.info(
            "Membership %s created for customer %s on plan %s",
            membership.id,
            membership.cod_cliente,
            membership.plan_id,
        )
        return membership

    def update_membership(
        self, membership_id: int, membership_in: MembershipUpdate
    ) -> CustomerMembership:
        membership = self._get_active(membership_id, "Membresía no encontrada o inactiva.")
        self._validate_references(membership_in)
        if membership_repository.active_membership_exists(
            self.db,
            membership_in.cod_cliente,
            membership_in.plan_id,
            exclude_id=membership_id,
        ):
            raise ConflictError(_DUPLICATE_ON_UPDATE)
        self._validate_dates(membership_in)

        with self._transaction(
            "Error interno del servidor al actualizar la membresía.",
            conflict_message=_DUPLICATE_ON_UPDATE,
        ):
            for field, value in _membership_values(membership_in).items():
                setattr(membership, field, value)
            self.db.flush()
        self.db.refresh(membership)
        return membership

    def deactivate_membership(self, membership_id: int) -> None:
        membership = self._get_active(
            membership_id, "Membresía no encontrada o ya inactiva."
        )
        with self._transaction("Error interno del servidor al desactivar la membresía."):
            membership.estado = MEMBERSHIP_STATUS_INACTIVE
        logger.info("Membership %s deactivated", membership_id)


__all__ = ["MembershipService"]
