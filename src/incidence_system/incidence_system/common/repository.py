from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, TypeVar

from ..database.pagination import Page, PageRequest

T = TypeVar("T")


class CrudRepository(Protocol[T]):
    """Repository interface shared by the catalog entities.

    Note (DIP): services depend on this interface, not on SQLAlchemy.
    """

    def list_page(self, request: PageRequest, **filters: Any) -> Page[T]:
        raise NotImplementedError

    def list_all(self, **filters: Any) -> Sequence[T]:
        raise NotImplementedError

    def get_by_id(self, entity_id: int) -> Optional[T]:
        raise NotImplementedError

    def create(self, **values: Any) -> T:
        raise NotImplementedError

    def update(self, entity_id: int, **values: Any) -> Optional[T]:
        raise NotImplementedError

    def delete_by_id(self, entity_id: int) -> bool:
        """Returns False when the row does not exist; raises ConflictError when it is referenced."""

        raise NotImplementedError
