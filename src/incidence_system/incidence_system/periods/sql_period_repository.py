from __future__ import annotations

from datetime import date
from typing import Any, Optional

from sqlalchemy import select

from ..core.enums import Status
from ..database.crud import SqlCrudRepository
from ..database.orm import PeriodRow
from .model import Period
from .repository import PeriodRepository


class SqlPeriodRepository(SqlCrudRepository[PeriodRow, Period], PeriodRepository):
    model = PeriodRow
    search_columns = (PeriodRow.period_name,)
    order_by = (PeriodRow.period_start.desc(), PeriodRow.id.desc())
    in_use_message = "No se puede eliminar el periodo: tiene movimientos registrados"

    def _filters(self, *, status: Optional[Status] = None, **_: Any) -> list:
        return [PeriodRow.period_status == status] if status is not None else []

    def get_current(self, *, on: date) -> Optional[Period]:
        with self._conn_factory.session_scope() as session:
            row = session.scalars(
                select(PeriodRow)
                .where(
                    PeriodRow.period_status == Status.ACTIVE,
                    PeriodRow.period_start <= on,
                    PeriodRow.period_end >= on,
                )
                .order_by(PeriodRow.period_start.desc())
                .limit(1)
            ).first()
            return self.to_domain(row) if row is not None else None

    def to_domain(self, row: PeriodRow) -> Period:
        return period_from_row(row)


def period_from_row(row: PeriodRow) -> Period:
    return Period(
        period_id=int(row.id),
        period_name=row.period_name,
        period_start=row.period_start,
        period_end=row.period_end,
        period_status=Status(row.period_status),
        created_at=row.created_at,
    )
