"""Business logic for plan benefits."""

from __future__ import annotations

from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.models import MembershipBenefit
from app.repository import benefit_repository, plan_repository
from app.schemas import BenefitCreate, BenefitUpdate
from app.services.base import BaseService

_DUPLICATE_KEY = "Ya existe un beneficio con esta clave para el plan especificado."


class BenefitService(BaseService):
    def _ensure_active_plan(self, plan_id: int) -> None:
        if plan_repository.get_active_plan(self.db, plan_id) is None:
            raise ValidationError("El plan especificado no existe o está inactivo.")

    def list_benefits(self) -> list[MembershipBenefit]:
        return benefit_repository.list_benefits(self.db)

    def get_benefit(self, benefit_id: int) -> MembershipBenefit:
        benefit = benefit_repository.get_benefit(self.db, benefit_id)
        if benefit is None:
            raise NotFoundError("El beneficio no existe.")
        return benefit

    def create_benefit(self, benefit_in: BenefitCreate) -> MembershipBenefit:
        self._ensure_active_plan(benefit_in.plan_id)
        if benefit_repository.benefit_key_exists(
            self.db, benefit_in.plan_id, benefit_in.clave
        ):
            raise ConflictError(_DUPLICATE_KEY)

        benefit = MembershipBenefit(**benefit_in.model_dump())
        with self._transaction(
            "Error al crear el beneficio.", conflict_message=_DUPLICATE_KEY
        ):
            benefit_repository.create_benefit(self.db, benefit)
        self.db.refresh(benefit)
        return benefit

    def update_benefit(self, benefit_id: int, benefit_in: BenefitUpdate) -> MembershipBenefit:
        benefit = self.get_benefit(benefit_id)
        self._ensure_active_plan(benefit_in.plan_id)
        if benefit_in.clave != benefit.clave and benefit_repository.benefit_key_exists(
            self.db, benefit_in.plan_id, benefit_in.clave, exclude_id=benefit_id
        ):
            raise ConflictError(_DUPLICATE_KEY)

        with self._transaction(
            "Error al actualizar el beneficio.", conflict_message=_DUPLICATE_KEY
        ):
            for field, value in benefit_in.model_dump().items():
                setattr(benefit, field, value)
            self.db.flush()
        self.db.refresh(benefit)
        return benefit

    def delete_benefit(self, benefit_id: int) -> None:
        benefit = self.get_benefit(benefit_id)
        with self._transaction("Error al eliminar el beneficio."):
            benefit_repository.delete_benefit(self.db, benefit)


__all__ = ["BenefitService"]
