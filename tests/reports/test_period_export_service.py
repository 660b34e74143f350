from __future__ import annotations

import io
from datetime import date

import pytest
from openpyxl import load_workbook

from src.incidence_system.incidence_system.core.enums import EmployeeType, Role, Status
from src.incidence_system.incidence_system.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from src.incidence_system.incidence_system.employees.model import Employee
from src.incidence_system.incidence_system.incidents.model import Incident
from src.incidence_system.incidence_system.movements.model import Movement
from src.incidence_system.incidence_system.periods.model import Period
from src.incidence_system.incidence_system.reports.service import PeriodExportService

PERIOD = Period(
    period_id=1,
    period_name="Julio 2024",
    period_start=date(2024, 7, 1),
    period_end=date(2024, 7, 31),
    period_status=Status.ACTIVE,
)


def _movement(movement_id: int, employee_code: int, incident_code: str) -> Movement:
    return Movement(
        movement_id=movement_id,
        period_id=1,
        employee_id=employee_code,
        incident_id=movement_id,
        incidence_date=date(2024, 7, 10),
        incidence_observation="",
        incidence_status=Status.ACTIVE,
        period=PERIOD,
        employee=Employee(
            employee_id=employee_code,
            office_id=1,
            employee_code=employee_code,
            employee_name="x",
            employee_type=EmployeeType.SINDICALIZADO,
            employee_status=Status.ACTIVE,
        ),
        incident=Incident(
            incident_id=movement_id,
            incident_code=incident_code,
            incident_name=incident_code,
            incident_status=Status.ACTIVE,
        ),
    )


class InMemoryPeriods:
    def get_by_id(self, period_id: int):
        return PERIOD if int(period_id) == PERIOD.period_id else None


class InMemoryMovements:
    def __init__(self, movements):
        self._movements = list(movements)

    def count_active_by_period(self, period_ids):
        counts = {int(i): 0 for i in period_ids}
        for m in self._movements:
            if m.period_id in counts and m.is_active:
                counts[m.period_id] += 1
        return counts

    def list_active_for_period(self, period_id):
        return [m for m in self._movements if m.period_id == period_id and m.is_active]


@pytest.fixture
def service() -> PeriodExportService:
    movements = [_movement(1, 1001, "FAL"), _movement(2, 1002, "RET")]
    return PeriodExportService(InMemoryPeriods(), InMemoryMovements(movements))


def test_counts_include_every_requested_period(service):
    counts = service.count_active(current_role=Role.ENCARGADO_RRHH, period_ids=[1, 2])

    assert counts == {"1": 2, "2": 0}


def test_csv_export_has_expected_columns_and_rows(service):
    export = service.export(current_role=Role.SUPERVISOR_REGIONES, period_id=1, fmt="csv")

    assert export.filename == "periodo_Julio_2024.csv"
    assert export.mimetype == "text/csv"
    assert export.content.decode("utf-8").splitlines() == [
        "nombre_periodo,codigo_empleado,codigo_incidencia",
        "Julio 2024,1001,FAL",
        "Julio 2024,1002,RET",
    ]


def test_xlsx_export_is_a_workbook(service):
    export = service.export(current_role=Role.SUPER_ADMIN, period_id=1, fmt="xlsx")

    sheet = load_workbook(io.BytesIO(export.content)).active
    rows = list(sheet.iter_rows(values_only=True))
    assert rows[0] == ("nombre_periodo", "codigo_empleado", "codigo_incidencia")
    assert len(rows) == 3


def test_unknown_period_is_not_found(service):
    with pytest.raises(NotFoundError):
        service.export(current_role=Role.SUPER_ADMIN, period_id=99)


def test_unknown_format_is_rejected(service):
    with pytest.raises(ValidationError):
        service.export(current_role=Role.SUPER_ADMIN, period_id=1, fmt="pdf")


def test_casino_role_cannot_export(service):
    with pytest.raises(ForbiddenError):
        service.export(current_role=Role.ENCARGADO_CASINO, period_id=1)
