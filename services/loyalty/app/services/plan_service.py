"""Business logic for membership plans."""

from __future__ import annotations

import logging

from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.models import MembershipPlan
from app.repository import plan_repository
from app.schemas import PlanCreate, PlanUpdate
from app.services.base import BaseService
from app.services.period_utils import utcnow

logger = logging.getLogger(__name__)

_MIN_ACCUMULATION_MONTHS = 1
_MAX_ACCUMULATION_MONTHS = 12


class PlanService(BaseService):
    """Create, read, update and soft-delete membership plans."""

    @staticmethod
    def _validate_accumulation(months: int) -> None:
        if not _MIN_ACCUMULATION_MONTHS <= months <= _MAX_ACCUMULATION_MONTHS:
            raise ValidationError(
                "Los meses de acumulación máxima deben estar entre 1 y 12."
            )

    def list_plans(self) -> list[MembershipPlan]:
        return plan_repository.list_active_plans(self.db)

    def get_plan(self, plan_id: int) -> MembershipPlan:
        plan = plan_repository.get_active_plan(self.db, plan_id)
        if plan is None:
            raise NotFoundError("El plan no existe o está inactivo.")
        return plan

    def create_plan(self, plan_in: PlanCreate) -> MembershipPlan:
        if plan_repository.active_plan_name_exists(self.db, plan_in.nombre):
            raise ConflictError("Ya existe un plan activo con ese nombre.")
        self._validate_accumulation(plan_in.meses_acumulacion_max)

        plan = MembershipPlan(**plan_in.model_dump(), fecha_creacion=utcnow())
        with self._transaction(
            "Error al crear el plan.",
            conflict_message="Ya existe un plan activo con ese nombre.",
        ):
            plan_repository.create_plan(self.db, plan)
        self.db.refresh(plan)
        logger.info("Plan %s created (%s)", plan.id, plan.nombre)
        return plan

    def update_plan(self, plan_id: int, plan_in: PlanUpdate) -> MembershipPlan:
        plan = plan_repository.get_plan(self.db, plan_id)
        if plan is None:
            raise NotFoundError("El plan no existe.")

        if (
            plan_in.nombre != plan.nombre
            and plan_repository.active_plan_name_exists(
                self.db, plan_in.nombre, exclude_id=plan_id
            )
        ):
            raise ConflictError("Ya existe otro plan activo con ese nombre.")
        self._validate_accumulation(plan_in.meses_acumulacion_max)

        with self._transaction(
            "Error al actualizar el plan.",
            conflict_message="Ya existe otro plan activo con ese nombre.",
        ):
            for field, value in plan_in.model_dump().items():
                setattr(plan, field, value)
            self.db.flush()
        self.db.refresh(plan)
        return plan

    def delete_plan(self, plan_id: int) -> None:
        plan = plan_repository.get_plan(self.db, plan_id)
        if plan is None or not plan.activo:
            raise NotFoundError("El plan no existe o ya está inactivo.")

        with self._transaction("Error al desactivar el plan."):
            plan.activo = False
        logger.info("Plan %s deactivated", plan_id)


__all__ = ["PlanService"]
