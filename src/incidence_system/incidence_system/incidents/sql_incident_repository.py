from __future__ import annotations

from typing import Any, Optional

from ..core.enums import Status
from ..database.crud import SqlCrudRepository
from ..database.orm import IncidentRow
from .model import Incident


class SqlIncidentRepository(SqlCrudRepository[IncidentRow, Incident]):
    model = IncidentRow
    search_columns = (IncidentRow.incident_name, IncidentRow.incident_code)
    order_by = (IncidentRow.incident_code.asc(),)
    duplicate_message = "Ya existe una incidencia con ese código"
    in_use_message = "No se puede eliminar la incidencia: tiene movimientos registrados"

    def _filters(self, *, status: Optional[Status] = None, **_: Any) -> list:
        return [IncidentRow.incident_status == status] if status is not None else []

    def to_domain(self, row: IncidentRow) -> Incident:
        return incident_from_row(row)


def incident_from_row(row: IncidentRow) -> Incident:
    return Incident(
        incident_id=int(row.id),
        incident_code=row.incident_code,
        incident_name=row.incident_name,
        incident_status=Status(row.incident_status),
        created_at=row.created_at,
    )
