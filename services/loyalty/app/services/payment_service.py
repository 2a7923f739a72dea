"""Business logic for managing membership payments."""

from __future__ import annotations

from typing import Optional

from app.core.errors import ConflictError, NotFoundError, ValidationError
from app.models import MembershipPayment
from app.repository import membership_repository, payment_repository
from app.schemas import PaymentCreate, PaymentUpdate
from app.services.base import BaseService
from app.services.period_utils import ensure_utc, is_valid_period, utcnow

_DUPLICATE_PERIOD = "Ya existe un pago para este período y membresía."
_DUPLICATE_REFERENCE = "Ya existe un pago con esta referencia externa."
_DUPLICATE_NEW_REFERENCE = "Ya existe un pago con esta nueva referencia externa."


class PaymentService(BaseService):
    def _validate_payload(self, payload: PaymentCreate | PaymentUpdate) -> None:
        membership = membership_repository.get_active_membership(
            self.db, payload.customer_membership_id
        )
        if membership is None:
            raise ValidationError("La membresía especificada no existe o está inactiva.")

        if payload.periodo is not None and not is_valid_period(payload.periodo):
            raise ValidationError("El Periodo debe estar en formato yyyyMM (ej. 202506).")

        if ensure_utc(payload.fecha_pago) > utcnow():
            raise ValidationError("La FechaPago no puede ser futura.")

    @staticmethod
    def _values(payload: PaymentCreate | PaymentUpdate) -> dict:
        values = payload.model_dump()
        values["referencia_externa"] = values["referencia_externa"] or None
        values["fecha_pago"] = ensure_utc(values["fecha_pago"])
        return values

    def list_payments(self) -> list[MembershipPayment]:
        return payment_repository.list_payments(self.db)

    def get_payment(self, payment_id: int) -> MembershipPayment:
        payment = payment_repository.get_payment(self.db, payment_id)
        if payment is None:
            raise NotFoundError("El pago no existe.")
        return payment

    def create_payment(self, payload: PaymentCreate) -> MembershipPayment:
        self._validate_payload(payload)

        if payload.periodo is not None and payment_repository.period_payment_exists(
            self.db, payload.customer_membership_id, payload.periodo
        ):
            raise ConflictError(_DUPLICATE_PERIOD)

        if payload.referencia_externa and payment_repository.external_reference_exists(
            self.db, payload.referencia_externa
        ):
            raise ConflictError(_DUPLICATE_REFERENCE)

        payment = MembershipPayment(**self._values(payload))
        with self._transaction(
            "Error al crear el pago.",
            conflict_message="Ya existe un pago con el mismo período o referencia externa.",
        ):
            payment_repository.create_payment(self.db, payment)
        self.db.refresh(payment)
        return payment

    def update_payment(self, payment_id: int, payload: PaymentUpdate) -> MembershipPayment:
        payment = self.get_payment(payment_id)
        self._validate_payload(payload)

        if (
            payload.periodo is not None
            and payload.periodo != payment.periodo
            and payment_repository.period_payment_exists(
                self.db,
                payload.customer_membership_id,
                payload.periodo,
                exclude_id=payment_id,
            )
        ):
            raise ConflictError(_DUPLICATE_PERIOD)

        new_reference: Optional[str] = payload.referencia_externa
        if (
            new_reference
            and new_reference != payment.referencia_externa
            and payment_repository.external_reference_exists(
                self.db, new_reference, exclude_id=payment_id
            )
        ):
            raise ConflictError(_DUPLICATE_NEW_REFERENCE)

        with self._transaction(
            "Error al actualizar el pago.",
            conflict_message="Ya existe un pago con el mismo período o referencia externa.",
        ):
            for field, value in self._values(payload).items():
                setattr(payment, field, value)
            self.db.flush()
        self.db.refresh(payment)
        return payment

    def delete_payment(self, payment_id: int) -> None:
        payment = self.get_payment(payment_id)
        with self._transaction("Error al eliminar el pago."):
            payment_repository.delete_payment(self.db, payment)


__all__ = ["PaymentService"]
