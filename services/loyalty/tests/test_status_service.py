from __future__ import annotations

from datetime import datetime, timezone

import pytest
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, ValidationError
from app.models import MEMBERSHIP_STATUS_INACTIVE
from app.services import MembershipStatusService
from app.services.period_utils import current_period

NOW = datetime(2024, 5, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def membership(make_customer, make_plan, make_benefit, make_membership):
    plan = make_plan(nombre="Plan Cine", entradas_mensuales=5, nivel=2, precio_mensual=49.99)
    make_benefit(plan, clave="SNACKS", observacion="10% en snacks")
    make_benefit(plan, clave="3D", observacion="Sin recargo en 3D")
    return make_membership(
        make_customer(1024),
        plan,
        fecha_inicio=datetime(2024, 1, 1, tzinfo=timezone.utc),
        fecha_fin=datetime(2024, 12, 31, tzinfo=timezone.utc),
    )


def test_available_entries_subtract_current_period_usage(
    db_session: Session, membership, make_balance
) -> None:
    make_balance(membership, periodo=202405, entradas_asignadas=5, entradas_usadas=2)

    status = MembershipStatusService(db_session).get_status("1024", now=NOW)

    assert status.entradas_disponibles == 3
    assert status.estado == "ACTIVO"
    assert status.nombre_plan == "Plan Cine"
    assert status.entradas_mensuales == 5
    assert status.nivel == 2
    assert status.precio_mensual == pytest.approx(49.99)
    assert status.beneficios == ["10% en snacks", "Sin recargo en 3D"]


def test_no_balance_in_period_means_full_allotment(
    db_session: Session, membership, make_balance
) -> None:
    make_balance(membership, periodo=202404, entradas_usadas=4)

    status = MembershipStatusService(db_session).get_status("1024", now=NOW)

    assert status.entradas_disponibles == 5


def test_usage_above_allotment_is_not_clamped(
    db_session: Session, membership, make_balance
) -> None:
    make_balance(membership, periodo=202405, entradas_asignadas=10, entradas_usadas=4)
    make_balance(membership, periodo=202405, entradas_asignadas=10, entradas_usadas=3)

    status = MembershipStatusService(db_session).get_status("1024", now=NOW)

    assert status.entradas_disponibles == -2


def test_defaults_to_the_real_current_period(
    db_session: Session, make_customer, make_plan, make_membership, make_balance
) -> None:
    membership = make_membership(make_customer(7), make_plan(entradas_mensuales=5))
    make_balance(membership, periodo=current_period(), entradas_usadas=2)

    status = MembershipStatusService(db_session).get_status("7")

    assert status.entradas_disponibles == 3


def test_expired_membership_is_reported_as_not_found(db_session: Session, membership) -> None:
    later = datetime(2025, 1, 1, 0, 0, 1, tzinfo=timezone.utc)

    with pytest.raises(NotFoundError) as excinfo:
        MembershipStatusService(db_session).get_status("1024", now=later)

    assert excinfo.value.message == "La membresía ha expirado."


def test_open_ended_membership_never_expires(
    db_session: Session, make_customer, make_plan, make_membership
) -> None:
    make_membership(make_customer(8), make_plan(), fecha_fin=None)

    status = MembershipStatusService(db_session).get_status("8", now=NOW)

    assert status.entradas_disponibles == 5


def test_inactive_membership_is_not_found(db_session: Session, membership) -> None:
    membership.estado = MEMBERSHIP_STATUS_INACTIVE
    db_session.commit()

    with pytest.raises(NotFoundError) as excinfo:
        MembershipStatusService(db_session).get_status("1024", now=NOW)

    assert excinfo.value.message == "Cliente sin membresía activa."


@pytest.mark.parametrize(
    "raw",
    ["abc", "12a", "NaN", "Infinity", "1e3", "1E1000000", "1" * 30, "12.", ""],
)
def test_invalid_customer_code_is_rejected(db_session: Session, raw: str) -> None:
    with pytest.raises(ValidationError) as excinfo:
        MembershipStatusService(db_session).get_status(raw)

    assert excinfo.value.message == "CodCliente inválido."


def test_decimal_customer_code_is_accepted(db_session: Session, membership) -> None:
    status = MembershipStatusService(db_session).get_status("1024.0", now=NOW)

    assert status.plan_id == membership.plan_id


@pytest.mark.parametrize("raw", ["99999999999999999999", "-9223372036854775809"])
def test_codes_beyond_the_key_range_have_no_membership(db_session: Session, raw: str) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        MembershipStatusService(db_session).get_status(raw)

    assert excinfo.value.message == "Cliente sin membresía activa."


def test_membership_ending_later_today_is_still_active(
    db_session: Session, make_customer, make_plan, make_membership
) -> None:
    make_membership(
        make_customer(9),
        make_plan(),
        fecha_inicio=datetime(2024, 1, 1, tzinfo=timezone.utc),
        fecha_fin=datetime(2024, 5, 15, 18, 30, tzinfo=timezone.utc),
    )
    service = MembershipStatusService(db_session)

    assert service.get_status("9", now=NOW).entradas_disponibles == 5

    with pytest.raises(NotFoundError) as excinfo:
        service.get_status("9", now=datetime(2024, 5, 15, 18, 31, tzinfo=timezone.utc))

    assert excinfo.value.message == "La membresía ha expirado."
