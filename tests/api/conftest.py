from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import pytest
from werkzeug.security import generate_password_hash

from src.incidence_system.incidence_system.core.enums import EmployeeType, Role, Status
from src.incidence_system.incidence_system.database.orm import (
    CompanyRow,
    EmployeeRow,
    IncidentRow,
    OfficeRow,
    PeriodRow,
    UserRow,
)
from src.incidence_system.incidence_system.main import create_app

PASSWORD = "secret123"


@dataclass(frozen=True)
class Seed:
    company_id: int
    office_a: int
    office_b: int
    employee_a: int
    employee_b: int
    incident: int
    period: int


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app({"TESTING": True})
    yield app
    app.extensions["container"].conn.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seed(app) -> Seed:
    conn = app.extensions["container"].conn
    with conn.session_scope() as session:
        company = CompanyRow(company_name="Grupo Uno", company_status=Status.ACTIVE)
        session.add(company)
        session.flush()

        office_a = OfficeRow(company_id=company.id, office_name="Centro", office_status=Status.ACTIVE)
        office_b = OfficeRow(company_id=company.id, office_name="Norte", office_status=Status.ACTIVE)
        session.add_all([office_a, office_b])
        session.flush()

        employee_a = EmployeeRow(
            office_id=office_a.id,
            employee_code=1001,
            employee_name="Ana López",
            employee_type=EmployeeType.SINDICALIZADO,
            employee_status=Status.ACTIVE,
        )
        employee_b = EmployeeRow(
            office_id=office_b.id,
            employee_code=2001,
            employee_name="Bruno Díaz",
            employee_type=EmployeeType.CONFIANZA,
            employee_status=Status.ACTIVE,
        )
        incident = IncidentRow(incident_code="FAL", incident_name="Falta", incident_status=Status.ACTIVE)
        period = PeriodRow(
            period_name="Julio 2024",
            period_start=date(2024, 7, 1),
            period_end=date(2024, 7, 31),
            period_status=Status.ACTIVE,
        )
        session.add_all([employee_a, employee_b, incident, period])
        session.flush()

        users = [
            ("admin@example.com", Role.SUPER_ADMIN, [], Status.ACTIVE),
            ("rrhh@example.com", Role.ENCARGADO_RRHH, [office_a], Status.ACTIVE),
            ("casino@example.com", Role.ENCARGADO_CASINO, [office_b], Status.ACTIVE),
            ("zona@example.com", Role.SUPERVISOR_REGIONES, [], Status.ACTIVE),
            ("baja@example.com", Role.ENCARGADO_RRHH, [office_a], Status.INACTIVE),
        ]
        for email, role, offices, status in users:
            user = UserRow(
                company_id=company.id,
                user_name=email.split("@")[0],
                user_email=email,
                password_hash=generate_password_hash(PASSWORD),
                user_role=role,
                user_status=status,
            )
            user.offices = offices
            session.add(user)

        session.flush()
        return Seed(
            company_id=company.id,
            office_a=office_a.id,
            office_b=office_b.id,
            employee_a=employee_a.id,
            employee_b=employee_b.id,
            incident=incident.id,
            period=period.id,
        )


@pytest.fixture
def login(client):
    def _login(email: str, password: str = PASSWORD):
        resp = client.post("/api/auth/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.get_json()
        return resp

    return _login
