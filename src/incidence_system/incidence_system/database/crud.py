from __future__ import annotations

from typing import Any, Callable, ClassVar, Generic, Optional, Sequence, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..common.logging_config import get_logger
from ..core.exceptions import ConflictError, DomainError
from .connection import DatabaseConnection
from .orm import Base
from .pagination import Page, PageRequest, paginate

logger = get_logger(__name__)

R = TypeVar("R", bound=Base)
T = TypeVar("T")


class SqlCrudRepository(Generic[R, T]):
    """Shared list/get/create/update/delete over one ORM table.

    Subclasses set ``model``, ``search_columns``, ``order_by`` and implement
    ``to_domain``; messages for integrity failures are per resource.
    """

    model: ClassVar[Type[Base]]
    search_columns: ClassVar[Sequence[Any]] = ()
    order_by: ClassVar[Sequence[Any]] = ()
    duplicate_message: ClassVar[str] = "El registro ya existe"
    duplicate_error: ClassVar[Type[DomainError]] = ConflictError
    in_use_message: ClassVar[str] = "No se puede eliminar: el registro está en uso"

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def to_domain(self, row: R) -> T:
        raise NotImplementedError

    def _base_query(self):
        return select(self.model)

    def _filters(self, **filters: Any) -> list:
        """Hook for subclasses: extra WHERE clauses built from keyword filters."""
        return []

    def list_page(self, request: PageRequest, **filters: Any) -> Page[T]:
        with self._conn_factory.session_scope() as session:
            stmt = self._base_query().where(*self._filters(**filters))
            return paginate(
                session,
                stmt,
                request=request,
                search_columns=self.search_columns,
                order_by=self.order_by,
                convert=self.to_domain,
            )

    def list_all(self, **filters: Any) -> Sequence[T]:
        with self._conn_factory.session_scope() as session:
            stmt = self._base_query().where(*self._filters(**filters)).order_by(*self.order_by)
            return [self.to_domain(r) for r in session.scalars(stmt).unique().all()]

    def get_by_id(self, entity_id: int) -> Optional[T]:
        with self._conn_factory.session_scope() as session:
            row = session.get(self.model, int(entity_id))
            return self.to_domain(row) if row is not None else None

    def _write(self, fn: Callable[[Session], R]) -> T:
        try:
            with self._conn_factory.session_scope() as session:
                row = fn(session)
                session.flush()
                session.refresh(row)
                return self.to_domain(row)
        except IntegrityError as e:
            logger.warning("integrity error on %s: %s", self.model.__tablename__, e.orig)
            raise self.duplicate_error(self.duplicate_message)

    def create(self, **values: Any) -> T:
        def _insert(session: Session) -> R:
            row = self.model(**values)
            session.add(row)
            return row

        return self._write(_insert)

    def update(self, entity_id: int, **values: Any) -> Optional[T]:
        with self._conn_factory.session_scope() as session:
            if session.get(self.model, int(entity_id)) is None:
                return None

        def _apply(session: Session) -> R:
            row = session.get(self.model, int(entity_id))
            for key, value in values.items():
                setattr(row, key, value)
            return row

        return self._write(_apply)

    def delete_by_id(self, entity_id: int) -> bool:
        try:
            with self._conn_factory.session_scope() as session:
                row = session.get(self.model, int(entity_id))
                if row is None:
                    return False
                session.delete(row)
                session.flush()
                return True
        except IntegrityError as e:
            logger.warning("delete blocked on %s id=%s: %s", self.model.__tablename__, entity_id, e.orig)
            raise ConflictError(self.in_use_message)
