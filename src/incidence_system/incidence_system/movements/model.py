from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import optional_text, require_positive_int
from ..core.enums import Status
from ..employees.model import Employee
from ..incidents.model import Incident
from ..periods.model import Period


@dataclass(frozen=True)
class MovementDraft:
    """Proposed values for a movement create/update, already type-checked."""

    period_id: int
    employee_id: int
    incident_id: int
    incidence_date: date
    incidence_observation: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "MovementDraft":
        return cls(
            period_id=require_positive_int(payload.get("period_id"), "Periodo"),
            employee_id=require_positive_int(payload.get("employee_id"), "Empleado"),
            incident_id=require_positive_int(payload.get("incident_id"), "Incidencia"),
            incidence_date=parse_iso_date(payload.get("incidence_date"), "Fecha de incidencia"),
            incidence_observation=optional_text(payload.get("incidence_observation")),
        )


@dataclass(frozen=True)
class Movement:
    """An incidence: one employee, one incident type, one period, one date."""

    movement_id: int
    period_id: int
    employee_id: int
    incident_id: int
    incidence_date: date
    incidence_observation: str
    incidence_status: Status
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    period: Optional[Period] = None
    employee: Optional[Employee] = None
    incident: Optional[Incident] = None

    @property
    def is_active(self) -> bool:
        return self.incidence_status == Status.ACTIVE

    @property
    def triple(self) -> tuple[int, int, int]:
        return (self.period_id, self.employee_id, self.incident_id)

    def to_dict(self) -> dict:
        return {
            "id": self.movement_id,
            "period_id": self.period_id,
            "employee_id": self.employee_id,
            "incident_id": self.incident_id,
            "incidence_date": self.incidence_date.isoformat(),
            "incidence_observation": self.incidence_observation,
            "incidence_status": self.incidence_status.value,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "period": self.period.to_dict() if self.period else None,
            "employee": self.employee.to_dict() if self.employee else None,
            "incident": self.incident.to_dict() if self.incident else None,
        }
