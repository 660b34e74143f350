from __future__ import annotations

from typing import Any, Iterable, Optional

from sqlalchemy import String, cast, select
from sqlalchemy.orm import selectinload

from ..core.enums import EmployeeType, Status
from ..database.crud import SqlCrudRepository
from ..database.orm import EmployeeRow
from .model import Employee


class SqlEmployeeRepository(SqlCrudRepository[EmployeeRow, Employee]):
    model = EmployeeRow
    search_columns = (EmployeeRow.employee_name, cast(EmployeeRow.employee_code, String))
    order_by = (EmployeeRow.employee_name.asc(), EmployeeRow.id.asc())
    duplicate_message = "Ya existe un empleado con ese código en la oficina"
    in_use_message = "No se puede eliminar el empleado: tiene movimientos registrados"

    def _base_query(self):
        return select(EmployeeRow).options(selectinload(EmployeeRow.office))

    def _filters(
        self,
        *,
        office_ids: Optional[Iterable[int]] = None,
        status: Optional[Status] = None,
        **_: Any,
    ) -> list:
        clauses = []
        if office_ids is not None:
            clauses.append(EmployeeRow.office_id.in_(list(office_ids)))
        if status is not None:
            clauses.append(EmployeeRow.employee_status == status)
        return clauses

    def to_domain(self, row: EmployeeRow) -> Employee:
        return employee_from_row(row)


def employee_from_row(row: EmployeeRow) -> Employee:
    return Employee(
        employee_id=int(row.id),
        office_id=int(row.office_id),
        employee_code=int(row.employee_code),
        employee_name=row.employee_name,
        employee_type=EmployeeType(row.employee_type),
        employee_status=Status(row.employee_status),
        office_name=row.office.office_name if row.office else "",
        created_at=row.created_at,
    )
