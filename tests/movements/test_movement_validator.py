from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

import pytest

from src.incidence_system.incidence_system.core.enums import EmployeeType, Status
from src.incidence_system.incidence_system.core.exceptions import (
    DuplicateError,
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
    OutOfRangeError,
)
from src.incidence_system.incidence_system.employees.model import Employee
from src.incidence_system.incidence_system.incidents.model import Incident
from src.incidence_system.incidence_system.movements.model import MovementDraft
from src.incidence_system.incidence_system.movements.validator import MovementValidator
from src.incidence_system.incidence_system.periods.model import Period


@dataclass
class InMemoryCatalog:
    items: dict

    def get_by_id(self, entity_id: int):
        return self.items.get(int(entity_id))


@dataclass
class InMemoryActiveTriples:
    # movement_id -> (period_id, employee_id, incident_id) of ACTIVE movements
    active: dict = field(default_factory=dict)

    def exists_active(self, *, period_id, employee_id, incident_id, exclude_id=None) -> bool:
        triple = (period_id, employee_id, incident_id)
        return any(t == triple and mid != exclude_id for mid, t in self.active.items())


def _period(status: Status = Status.ACTIVE) -> Period:
    return Period(
        period_id=1,
        period_name="2024-07",
        period_start=date(2024, 7, 1),
        period_end=date(2024, 7, 31),
        period_status=status,
    )


def _employee(status: Status = Status.ACTIVE) -> Employee:
    return Employee(
        employee_id=10,
        office_id=100,
        employee_code=1001,
        employee_name="Ana López",
        employee_type=EmployeeType.SINDICALIZADO,
        employee_status=status,
    )


def _incident(status: Status = Status.ACTIVE) -> Incident:
    return Incident(incident_id=20, incident_code="FAL", incident_name="Falta", incident_status=status)


def _validator(
    *,
    period: Optional[Period] = None,
    employee: Optional[Employee] = None,
    incident: Optional[Incident] = None,
    active: Optional[dict] = None,
) -> MovementValidator:
    period = period or _period()
    employee = employee or _employee()
    incident = incident or _incident()
    return MovementValidator(
        InMemoryCatalog({period.period_id: period}),
        InMemoryCatalog({employee.employee_id: employee}),
        InMemoryCatalog({incident.incident_id: incident}),
        InMemoryActiveTriples(active or {}),
    )


def _draft(day: date = date(2024, 7, 15), **overrides) -> MovementDraft:
    values = {"period_id": 1, "employee_id": 10, "incident_id": 20, "incidence_date": day}
    values.update(overrides)
    return MovementDraft(**values)


def test_valid_movement_returns_loaded_references():
    checked = _validator().validate(_draft())

    assert checked.period.period_id == 1
    assert checked.employee.office_id == 100
    assert checked.incident.incident_code == "FAL"


@pytest.mark.parametrize("field_name", ["period_id", "employee_id", "incident_id"])
def test_missing_reference_is_not_found(field_name):
    with pytest.raises(NotFoundError):
        _validator().validate(_draft(**{field_name: 999}))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"period": _period(Status.INACTIVE)},
        {"employee": _employee(Status.INACTIVE)},
        {"incident": _incident(Status.INACTIVE)},
    ],
)
def test_inactive_reference_is_invalid_state_regardless_of_date(kwargs):
    validator = _validator(**kwargs)

    with pytest.raises(InvalidStateError):
        validator.validate(_draft(date(2024, 7, 15)))
    with pytest.raises(InvalidStateError):
        validator.validate(_draft(date(2024, 9, 1)))


@pytest.mark.parametrize("day", [date(2024, 7, 1), date(2024, 7, 31)])
def test_period_boundaries_are_inclusive(day):
    checked = _validator().validate(_draft(day))
    assert checked.draft.incidence_date == day


@pytest.mark.parametrize("day", [date(2024, 6, 30), date(2024, 8, 1)])
def test_date_outside_period_is_out_of_range(day):
    with pytest.raises(OutOfRangeError):
        _validator().validate(_draft(day))


def test_second_active_movement_for_same_triple_is_duplicate():
    validator = _validator(active={5: (1, 10, 20)})

    with pytest.raises(DuplicateError):
        validator.validate(_draft())


def test_update_does_not_collide_with_itself():
    validator = _validator(active={5: (1, 10, 20)})

    checked = validator.validate(_draft(date(2024, 7, 20)), exclude_id=5)
    assert checked.draft.incidence_date == date(2024, 7, 20)


def test_update_colliding_with_another_active_movement_is_duplicate():
    validator = _validator(active={5: (1, 10, 20), 6: (1, 10, 21)})

    with pytest.raises(DuplicateError):
        validator.validate(_draft(), exclude_id=6)


def test_not_found_wins_over_invalid_state():
    validator = _validator(period=_period(Status.INACTIVE))

    with pytest.raises(NotFoundError):
        validator.validate(_draft(employee_id=999))


def test_out_of_range_is_reported_before_duplicate():
    validator = _validator(active={5: (1, 10, 20)})

    with pytest.raises(OutOfRangeError):
        validator.validate(_draft(date(2024, 8, 1)))


def _deny(employee: Employee) -> None:
    raise ForbiddenError(f"office {employee.office_id}")


@pytest.mark.parametrize(
    "validator, draft",
    [
        (_validator(employee=_employee(Status.INACTIVE)), _draft()),
        (_validator(), _draft(date(2024, 9, 1))),
        (_validator(active={5: (1, 10, 20)}), _draft()),
    ],
)
def test_authorize_runs_before_business_checks(validator, draft):
    with pytest.raises(ForbiddenError):
        validator.validate(draft, authorize=_deny)


def test_authorize_receives_loaded_employee():
    seen = []

    _validator().validate(_draft(), authorize=seen.append)

    assert [e.office_id for e in seen] == [100]
