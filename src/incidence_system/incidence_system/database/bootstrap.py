from __future__ import annotations

import calendar
from typing import List

from sqlalchemy import inspect, select
from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash

from ..common.datetime_utils import today
from ..common.logging_config import get_logger
from ..core.enums import EmployeeType, Role, Status
from .connection import DatabaseConnection
from .orm import Base, CompanyRow, EmployeeRow, IncidentRow, OfficeRow, PeriodRow, UserRow

logger = get_logger(__name__)

DEMO_COMPANY = "Empresa Demo"
DEMO_OFFICES = ("Oficina Central", "Oficina Norte")
DEMO_INCIDENTS = (("FAL", "Falta"), ("RET", "Retardo"), ("VAC", "Vacaciones"))
DEMO_EMPLOYEES = (
    (1001, "Ana López", EmployeeType.SINDICALIZADO, "Oficina Central"),
    (1002, "Carlos Pérez", EmployeeType.CONFIANZA, "Oficina Central"),
    (2001, "María García", EmployeeType.SINDICALIZADO, "Oficina Norte"),
)
# (name, email, password, role, linked offices)
DEMO_USERS = (
    ("Administrador", "admin@example.com", "admin123", Role.SUPER_ADMIN, ()),
    ("Recursos Humanos", "rrhh@example.com", "rrhh123", Role.ENCARGADO_RRHH, ("Oficina Central",)),
    ("Encargado Norte", "casino@example.com", "casino123", Role.ENCARGADO_CASINO, ("Oficina Norte",)),
)


def create_schema(conn: DatabaseConnection) -> None:
    """Create missing tables; existing tables are left untouched."""
    Base.metadata.create_all(conn.engine)
    logger.info("schema ready on %s", conn.url)


def list_tables(conn: DatabaseConnection) -> List[str]:
    return sorted(inspect(conn.engine).get_table_names())


def _get_or_add(session: Session, model, lookup: dict, **values):
    row = session.scalars(select(model).filter_by(**lookup)).first()
    if row is None:
        row = model(**lookup, **values)
        session.add(row)
        session.flush()
    return row


def seed_demo_data(conn: DatabaseConnection) -> None:
    """Insert demo catalog rows and users. Safe to run more than once."""
    with conn.session_scope() as session:
        company = _get_or_add(session, CompanyRow, {"company_name": DEMO_COMPANY}, company_status=Status.ACTIVE)

        offices = {
            name: _get_or_add(
                session,
                OfficeRow,
                {"company_id": company.id, "office_name": name},
                office_status=Status.ACTIVE,
            )
            for name in DEMO_OFFICES
        }

        for code, name in DEMO_INCIDENTS:
            _get_or_add(session, IncidentRow, {"incident_code": code}, incident_name=name, incident_status=Status.ACTIVE)

        for code, name, employee_type, office_name in DEMO_EMPLOYEES:
            _get_or_add(
                session,
                EmployeeRow,
                {"office_id": offices[office_name].id, "employee_code": code},
                employee_name=name,
                employee_type=employee_type,
                employee_status=Status.ACTIVE,
            )

        day = today()
        start = day.replace(day=1)
        end = day.replace(day=calendar.monthrange(day.year, day.month)[1])
        _get_or_add(
            session,
            PeriodRow,
            {"period_start": start, "period_end": end},
            period_name=start.strftime("%Y-%m"),
            period_status=Status.ACTIVE,
        )

        for name, email, password, role, office_names in DEMO_USERS:
            user = session.scalars(select(UserRow).filter_by(user_email=email)).first()
            if user is None:
                user = UserRow(
                    company_id=company.id,
                    user_name=name,
                    user_email=email,
                    password_hash=generate_password_hash(password),
                    user_role=role,
                    user_status=Status.ACTIVE,
                )
                user.offices = [offices[n] for n in office_names]
                session.add(user)

    logger.info("demo data ready")
