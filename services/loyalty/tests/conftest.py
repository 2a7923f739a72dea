from __future__ import annotations

import os

os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["API_KEY"] = "test-api-key"

from collections.abc import Callable, Generator
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base
from app.dependencies import get_db
from app.main import app
from app.models import (
    MEMBERSHIP_STATUS_ACTIVE,
    Customer,
    CustomerMembership,
    EntryBalance,
    MembershipBenefit,
    MembershipPlan,
)

API_HEADERS = {"X-API-Key": "test-api-key"}


@pytest.fixture()
def db_session() -> Generator[Session, None, None]:
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def client(db_session: Session) -> Generator[TestClient, None, None]:
    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        test_client.headers.update(API_HEADERS)
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture()
def make_customer(db_session: Session) -> Callable[..., Customer]:
    def _make(cod_cliente: int = 1, **overrides: Any) -> Customer:
        customer = Customer(
            cod_cliente=cod_cliente,
            nom_cliente=overrides.pop("nom_cliente", "Ana"),
            apellido=overrides.pop("apellido", "Pérez"),
            email=overrides.pop("email", f"cliente{cod_cliente}@example.com"),
            **overrides,
        )
        db_session.add(customer)
        db_session.commit()
        return customer

    return _make


@pytest.fixture()
def make_plan(db_session: Session) -> Callable[..., MembershipPlan]:
    def _make(**overrides: Any) -> MembershipPlan:
        values: dict[str, Any] = {
            "nombre": "Plan Básico",
            "precio_mensual": 29.99,
            "entradas_mensuales": 5,
            "meses_acumulacion_max": 3,
            "nivel": 1,
            "activo": True,
            "fecha_creacion": datetime.now(timezone.utc),
        }
        values.update(overrides)
        plan = MembershipPlan(**values)
        db_session.add(plan)
        db_session.commit()
        return plan

    return _make


@pytest.fixture()
def make_benefit(db_session: Session) -> Callable[..., MembershipBenefit]:
    def _make(plan: MembershipPlan, **overrides: Any) -> MembershipBenefit:
        values: dict[str, Any] = {
            "plan_id": plan.id,
            "clave": "DESCUENTO_SNACKS",
            "valor": 10,
            "dias_aplicables": "LMXJV",
            "observacion": "10% de descuento en snacks",
        }
        values.update(overrides)
        benefit = MembershipBenefit(**values)
        db_session.add(benefit)
        db_session.commit()
        return benefit

    return _make


@pytest.fixture()
def make_membership(db_session: Session) -> Callable[..., CustomerMembership]:
    def _make(customer: Customer, plan: MembershipPlan, **overrides: Any) -> CustomerMembership:
        values: dict[str, Any] = {
            "cod_cliente": customer.cod_cliente,
            "plan_id": plan.id,
            "fecha_inicio": datetime.now(timezone.utc) - timedelta(days=30),
            "fecha_fin": datetime.now(timezone.utc) + timedelta(days=335),
            "estado": MEMBERSHIP_STATUS_ACTIVE,
        }
        values.update(overrides)
        membership = CustomerMembership(**values)
        db_session.add(membership)
        db_session.commit()
        return membership

    return _make


@pytest.fixture()
def make_balance(db_session: Session) -> Callable[..., EntryBalance]:
    def _make(membership: CustomerMembership, **overrides: Any) -> EntryBalance:
        values: dict[str, Any] = {
            "customer_membership_id": membership.id,
            "periodo": 202406,
            "entradas_asignadas": 5,
            "entradas_usadas": 0,
            "fecha_vencimiento": datetime.now(timezone.utc) + timedelta(days=30),
        }
        values.update(overrides)
        balance = EntryBalance(**values)
        db_session.add(balance)
        db_session.commit()
        return balance

    return _make
