from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def membership(make_customer, make_plan, make_membership):
    return make_membership(make_customer(1), make_plan())


def _payment(membership_id: int, **overrides) -> dict:
    payload = {
        "customer_membership_id": membership_id,
        "fecha_pago": (datetime.now(timezone.utc) - timedelta(days=1)).isoformat(),
        "monto": 29.99,
        "estado": "APROBADO",
        "referencia_externa": "MP-1001",
        "periodo": 202405,
        "observaciones": None,
    }
    payload.update(overrides)
    return payload


def test_create_and_list_payments(client: TestClient, membership) -> None:
    created = client.post("/api/payments", json=_payment(membership.id))

    assert created.status_code == 201
    listing = client.get("/api/payments").json()["data"]
    assert [item["referencia_externa"] for item in listing] == ["MP-1001"]


def test_duplicate_period_and_reference_conflict(client: TestClient, membership) -> None:
    assert client.post("/api/payments", json=_payment(membership.id)).status_code == 201

    same_period = client.post(
        "/api/payments", json=_payment(membership.id, referencia_externa="MP-2002")
    )
    assert same_period.status_code == 409
    assert same_period.json() == {"error": "Ya existe un pago para este período y membresía."}

    same_reference = client.post("/api/payments", json=_payment(membership.id, periodo=202406))
    assert same_reference.status_code == 409
    assert same_reference.json() == {"error": "Ya existe un pago con esta referencia externa."}


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"periodo": 202413}, "El Periodo debe estar en formato yyyyMM (ej. 202506)."),
        ({"periodo": 99901}, "El Periodo debe estar en formato yyyyMM (ej. 202506)."),
        (
            {"fecha_pago": (datetime.now(timezone.utc) + timedelta(days=2)).isoformat()},
            "La FechaPago no puede ser futura.",
        ),
    ],
)
def test_payment_validation(client: TestClient, membership, overrides, message) -> None:
    response = client.post("/api/payments", json=_payment(membership.id, **overrides))

    assert response.status_code == 400
    assert response.json() == {"error": message}


def test_payment_needs_active_membership(client: TestClient) -> None:
    response = client.post("/api/payments", json=_payment(999))

    assert response.status_code == 400
    assert response.json() == {"error": "La membresía especificada no existe o está inactiva."}


def test_update_and_delete_payment(client: TestClient, membership) -> None:
    first = client.post("/api/payments", json=_payment(membership.id)).json()["data"]
    client.post(
        "/api/payments",
        json=_payment(membership.id, referencia_externa="MP-2002", periodo=202406),
    )

    clash = client.put(
        f"/api/payments/{first['id']}",
        json=_payment(membership.id, referencia_externa="MP-2002"),
    )
    assert clash.status_code == 409
    assert clash.json() == {"error": "Ya existe un pago con esta nueva referencia externa."}

    updated = client.put(
        f"/api/payments/{first['id']}", json=_payment(membership.id, monto=35.5)
    )
    assert updated.status_code == 204
    assert client.get(f"/api/payments/{first['id']}").json()["data"]["monto"] == 35.5

    assert client.delete(f"/api/payments/{first['id']}").status_code == 204
    assert client.get(f"/api/payments/{first['id']}").status_code == 404
