from __future__ import annotations

from typing import Any, Dict, FrozenSet, Iterable, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from ..core.enums import Status
from ..core.exceptions import DuplicateError
from ..database.crud import SqlCrudRepository
from ..database.orm import EmployeeRow, IncidentRow, MovementRow
from ..database.pagination import Page, PageRequest
from ..employees.sql_employee_repository import employee_from_row
from ..incidents.sql_incident_repository import incident_from_row
from ..periods.sql_period_repository import period_from_row
from .model import Movement, MovementDraft
from .repository import MovementRepository


class SqlMovementRepository(SqlCrudRepository[MovementRow, Movement], MovementRepository):
    model = MovementRow
    search_columns = (EmployeeRow.employee_name, IncidentRow.incident_name)
    order_by = (MovementRow.created_at.desc(), MovementRow.id.desc())
    duplicate_message = "Ya existe un movimiento activo para este periodo, empleado e incidencia"
    duplicate_error = DuplicateError

    def _base_query(self):
        return (
            select(MovementRow)
            .join(EmployeeRow, MovementRow.employee_id == EmployeeRow.id)
            .join(IncidentRow, MovementRow.incident_id == IncidentRow.id)
            .options(
                selectinload(MovementRow.period),
                selectinload(MovementRow.employee).selectinload(EmployeeRow.office),
                selectinload(MovementRow.incident),
            )
        )

    def _filters(
        self,
        *,
        office_ids: Optional[FrozenSet[int]] = None,
        period_id: Optional[int] = None,
        **_: Any,
    ) -> list:
        clauses = []
        if office_ids is not None:
            clauses.append(EmployeeRow.office_id.in_(sorted(office_ids)))
        if period_id is not None:
            clauses.append(MovementRow.period_id == int(period_id))
        return clauses

    def get_by_id(self, movement_id: int) -> Optional[Movement]:
        with self._conn_factory.session_scope() as session:
            row = session.scalars(self._base_query().where(MovementRow.id == int(movement_id))).first()
            return self.to_domain(row) if row is not None else None

    def exists_active(
        self,
        *,
        period_id: int,
        employee_id: int,
        incident_id: int,
        exclude_id: Optional[int] = None,
    ) -> bool:
        stmt = select(MovementRow.id).where(
            MovementRow.period_id == int(period_id),
            MovementRow.employee_id == int(employee_id),
            MovementRow.incident_id == int(incident_id),
            MovementRow.incidence_status == Status.ACTIVE,
        )
        if exclude_id is not None:
            stmt = stmt.where(MovementRow.id != int(exclude_id))
        with self._conn_factory.session_scope() as session:
            return session.scalars(stmt.limit(1)).first() is not None

    @staticmethod
    def _assign(row: MovementRow, draft: MovementDraft) -> None:
        row.period_id = draft.period_id
        row.employee_id = draft.employee_id
        row.incident_id = draft.incident_id
        row.incidence_date = draft.incidence_date
        row.incidence_observation = draft.incidence_observation
        row.incidence_status = Status.ACTIVE

    def create(self, draft: MovementDraft) -> Movement:
        def _insert(session: Session) -> MovementRow:
            row = MovementRow()
            self._assign(row, draft)
            session.add(row)
            return row

        return self._write(_insert)

    def update(self, movement_id: int, draft: MovementDraft) -> Optional[Movement]:
        if self.get_by_id(movement_id) is None:
            return None

        def _apply(session: Session) -> MovementRow:
            row = session.get(MovementRow, int(movement_id))
            self._assign(row, draft)
            return row

        return self._write(_apply)

    def list_page(
        self,
        request: PageRequest,
        *,
        office_ids: Optional[FrozenSet[int]] = None,
        period_id: Optional[int] = None,
    ) -> Page[Movement]:
        return super().list_page(request, office_ids=office_ids, period_id=period_id)

    def count_active_by_period(self, period_ids: Iterable[int]) -> Dict[int, int]:
        ids = sorted({int(i) for i in period_ids})
        counts = {i: 0 for i in ids}
        if not ids:
            return counts
        with self._conn_factory.session_scope() as session:
            rows = session.execute(
                select(MovementRow.period_id, func.count(MovementRow.id))
                .where(MovementRow.period_id.in_(ids), MovementRow.incidence_status == Status.ACTIVE)
                .group_by(MovementRow.period_id)
            ).all()
        for period_id, count in rows:
            counts[int(period_id)] = int(count)
        return counts

    def list_active_for_period(self, period_id: int) -> Sequence[Movement]:
        stmt = (
            self._base_query()
            .where(MovementRow.period_id == int(period_id), MovementRow.incidence_status == Status.ACTIVE)
            .order_by(EmployeeRow.employee_code, IncidentRow.incident_code)
        )
        with self._conn_factory.session_scope() as session:
            return [self.to_domain(r) for r in session.scalars(stmt).all()]

    def to_domain(self, row: MovementRow) -> Movement:
        return Movement(
            movement_id=int(row.id),
            period_id=int(row.period_id),
            employee_id=int(row.employee_id),
            incident_id=int(row.incident_id),
            incidence_date=row.incidence_date,
            incidence_observation=row.incidence_observation or "",
            incidence_status=Status(row.incidence_status),
            created_at=row.created_at,
            updated_at=row.updated_at,
            period=period_from_row(row.period) if row.period else None,
            employee=employee_from_row(row.employee) if row.employee else None,
            incident=incident_from_row(row.incident) if row.incident else None,
        )
