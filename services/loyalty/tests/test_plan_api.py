from __future__ import annotations

from fastapi.testclient import TestClient

PLAN = {
    "nombre": "Plan Oro",
    "precio_mensual": 59.9,
    "entradas_mensuales": 8,
    "meses_acumulacion_max": 6,
    "nivel": 3,
    "activo": True,
}


def test_create_and_fetch_plan(client: TestClient) -> None:
    response = client.post("/api/plans", json=PLAN)

    assert response.status_code == 201
    plan = response.json()["data"]
    assert plan["fecha_creacion"]

    fetched = client.get(f"/api/plans/{plan['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"]["nombre"] == "Plan Oro"


def test_active_plan_names_are_unique(client: TestClient, make_plan) -> None:
    make_plan(nombre="Plan Oro")

    response = client.post("/api/plans", json=PLAN)

    assert response.status_code == 409
    assert response.json() == {"error": "Ya existe un plan activo con ese nombre."}


def test_inactive_plan_name_can_be_reused(client: TestClient, make_plan) -> None:
    make_plan(nombre="Plan Oro", activo=False)

    assert client.post("/api/plans", json=PLAN).status_code == 201


def test_accumulation_months_must_be_within_a_year(client: TestClient) -> None:
    response = client.post("/api/plans", json={**PLAN, "meses_acumulacion_max": 13})

    assert response.status_code == 400
    assert response.json() == {
        "error": "Los meses de acumulación máxima deben estar entre 1 y 12."
    }


def test_update_plan(client: TestClient, make_plan) -> None:
    plan = make_plan()
    make_plan(nombre="Plan Oro")

    conflict = client.put(f"/api/plans/{plan.id}", json=PLAN)
    assert conflict.status_code == 409
    assert conflict.json() == {"error": "Ya existe otro plan activo con ese nombre."}

    renamed = client.put(f"/api/plans/{plan.id}", json={**PLAN, "nombre": "Plan Plata"})
    assert renamed.status_code == 204
    assert client.get(f"/api/plans/{plan.id}").json()["data"]["nombre"] == "Plan Plata"

    missing = client.put("/api/plans/999", json=PLAN)
    assert missing.status_code == 404


def test_delete_is_a_soft_delete(client: TestClient, make_plan) -> None:
    plan = make_plan()

    assert client.delete(f"/api/plans/{plan.id}").status_code == 204
    assert client.get("/api/plans").json()["data"] == []

    hidden = client.get(f"/api/plans/{plan.id}")
    assert hidden.status_code == 404
    assert hidden.json() == {"error": "El plan no existe o está inactivo."}

    again = client.delete(f"/api/plans/{plan.id}")
    assert again.status_code == 404
    assert again.json() == {"error": "El plan no existe o ya está inactivo."}
