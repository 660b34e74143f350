from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from ..common.logging_config import get_logger
from ..common.repository import CrudRepository
from ..core.exceptions import DuplicateError, InvalidStateError, NotFoundError, OutOfRangeError
from ..employees.model import Employee
from ..incidents.model import Incident
from ..periods.model import Period
from .model import MovementDraft
from .repository import MovementRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidatedMovement:
    draft: MovementDraft
    period: Period
    employee: Employee
    incident: Incident


class MovementValidator:
    """Decides whether a movement create/update may be written.

    Checks run in order and the first failure aborts:
    references exist, references are ACTIVE, the date lies inside the
    period (inclusive) and no other ACTIVE movement holds the same
    (period, employee, incident) triple. ``exclude_id`` is the movement
    being updated, which never counts as its own duplicate.

    ``authorize`` receives the employee as soon as it is loaded, so a
    caller can reject it before any state of that employee is reported.
    """

    def __init__(
        self,
        periods: CrudRepository[Period],
        employees: CrudRepository[Employee],
        incidents: CrudRepository[Incident],
        movements: MovementRepository,
    ):
        self._periods = periods
        self._employees = employees
        self._incidents = incidents
        self._movements = movements

    def validate(
        self,
        draft: MovementDraft,
        *,
        exclude_id: Optional[int] = None,
        authorize: Optional[Callable[[Employee], None]] = None,
    ) -> ValidatedMovement:
        employee = self._employees.get_by_id(draft.employee_id)
        if employee is not None and authorize is not None:
            authorize(employee)
        period = self._periods.get_by_id(draft.period_id)
        incident = self._incidents.get_by_id(draft.incident_id)

        if period is None:
            raise NotFoundError("El periodo no existe")
        if employee is None:
            raise NotFoundError("El empleado no existe")
        if incident is None:
            raise NotFoundError("La incidencia no existe")

        if not period.is_active:
            raise InvalidStateError("El periodo no está activo")
        if not employee.is_active:
            raise InvalidStateError("El empleado no está activo")
        if not incident.is_active:
            raise InvalidStateError("La incidencia no está activa")

        if not period.contains(draft.incidence_date):
            raise OutOfRangeError(
                f"La fecha de incidencia debe estar entre {period.period_start.isoformat()} "
                f"y {period.period_end.isoformat()}"
            )

        if self._movements.exists_active(
            period_id=draft.period_id,
            employee_id=draft.employee_id,
            incident_id=draft.incident_id,
            exclude_id=exclude_id,
        ):
            logger.warning(
                "duplicate movement rejected: period=%s employee=%s incident=%s",
                draft.period_id,
                draft.employee_id,
                draft.incident_id,
            )
            raise DuplicateError("Ya existe un movimiento activo para este periodo, empleado e incidencia")

        return ValidatedMovement(draft=draft, period=period, employee=employee, incident=incident)
