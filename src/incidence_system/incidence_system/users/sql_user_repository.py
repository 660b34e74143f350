from __future__ import annotations

from typing import Any, FrozenSet, Iterable, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from ..core.enums import Role, Status
from ..core.exceptions import NotFoundError
from ..database.crud import SqlCrudRepository
from ..database.orm import OfficeRow, UserOfficeRow, UserRow
from ..offices.model import Office
from .model import User
from .repository import UserRepository


def _load_offices(session: Session, office_ids: Iterable[int]) -> list[OfficeRow]:
    wanted = sorted(set(int(i) for i in office_ids))
    rows = list(session.scalars(select(OfficeRow).where(OfficeRow.id.in_(wanted))).all()) if wanted else []
    if len(rows) != len(wanted):
        raise NotFoundError("Alguna de las oficinas asignadas no existe")
    return rows


class SqlUserRepository(SqlCrudRepository[UserRow, User], UserRepository):
    model = UserRow
    search_columns = (UserRow.user_name, UserRow.user_email)
    order_by = (UserRow.created_at.desc(), UserRow.id.desc())
    duplicate_message = "El usuario ya existe"
    in_use_message = "No se puede eliminar el usuario"

    def _base_query(self):
        return select(UserRow).options(selectinload(UserRow.offices))

    def get_by_id(self, entity_id: int) -> Optional[User]:
        with self._conn_factory.session_scope() as session:
            row = session.scalars(self._base_query().where(UserRow.id == int(entity_id))).first()
            return self.to_domain(row) if row is not None else None

    def get_by_email(self, email: str) -> Optional[User]:
        with self._conn_factory.session_scope() as session:
            row = session.scalars(
                self._base_query().where(func.lower(UserRow.user_email) == email.strip().lower())
            ).first()
            return self.to_domain(row) if row is not None else None

    def get_office_ids(self, user_id: int) -> FrozenSet[int]:
        with self._conn_factory.session_scope() as session:
            ids = session.scalars(select(UserOfficeRow.office_id).where(UserOfficeRow.user_id == int(user_id))).all()
            return frozenset(int(i) for i in ids)

    def list_offices(self, user_id: int) -> Sequence[Office]:
        with self._conn_factory.session_scope() as session:
            rows = session.scalars(
                select(OfficeRow)
                .join(UserOfficeRow, UserOfficeRow.office_id == OfficeRow.id)
                .where(UserOfficeRow.user_id == int(user_id))
                .order_by(OfficeRow.office_name)
            ).all()
            return [
                Office(
                    office_id=int(r.id),
                    company_id=int(r.company_id),
                    office_name=r.office_name,
                    office_status=Status(r.office_status),
                )
                for r in rows
            ]

    def create(self, *, office_ids: Iterable[int] = (), **values: Any) -> User:
        def _insert(session: Session) -> UserRow:
            row = UserRow(**values)
            row.offices = _load_offices(session, office_ids)
            session.add(row)
            return row

        return self._write(_insert)

    def update(self, entity_id: int, *, office_ids: Optional[Iterable[int]] = None, **values: Any) -> Optional[User]:
        if self.get_by_id(entity_id) is None:
            return None

        def _apply(session: Session) -> UserRow:
            row = session.get(UserRow, int(entity_id))
            for key, value in values.items():
                setattr(row, key, value)
            if office_ids is not None:
                row.offices = _load_offices(session, office_ids)
            return row

        return self._write(_apply)

    def to_domain(self, row: UserRow) -> User:
        return User(
            user_id=int(row.id),
            company_id=int(row.company_id) if row.company_id is not None else None,
            user_name=row.user_name,
            user_email=row.user_email,
            password_hash=row.password_hash,
            user_role=Role(row.user_role),
            user_status=Status(row.user_status),
            office_ids=tuple(sorted(int(o.id) for o in row.offices)),
            created_at=row.created_at,
        )
