from __future__ import annotations

from typing import Any, Iterable, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from ..core.enums import Status
from ..database.crud import SqlCrudRepository
from ..database.orm import OfficeRow
from .model import Office


class SqlOfficeRepository(SqlCrudRepository[OfficeRow, Office]):
    model = OfficeRow
    search_columns = (OfficeRow.office_name,)
    order_by = (OfficeRow.office_name.asc(), OfficeRow.id.asc())
    in_use_message = "No se puede eliminar la oficina: tiene empleados o usuarios asociados"

    def _base_query(self):
        return select(OfficeRow).options(selectinload(OfficeRow.company))

    def _filters(self, *, office_ids: Optional[Iterable[int]] = None, **_: Any) -> list:
        if office_ids is None:
            return []
        return [OfficeRow.id.in_(list(office_ids))]

    def to_domain(self, row: OfficeRow) -> Office:
        return Office(
            office_id=int(row.id),
            company_id=int(row.company_id),
            office_name=row.office_name,
            office_status=Status(row.office_status),
            company_name=row.company.company_name if row.company else "",
            created_at=row.created_at,
        )
