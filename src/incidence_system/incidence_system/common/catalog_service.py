from __future__ import annotations

from typing import Any, ClassVar, Generic, Mapping, Sequence, TypeVar

from ..core.enums import Action, Resource, Role
from ..core.exceptions import NotFoundError
from ..core.permissions import require_access
from ..database.pagination import Page, PageRequest
from .logging_config import get_logger
from .repository import CrudRepository

logger = get_logger(__name__)

T = TypeVar("T")


class CatalogService(Generic[T]):
    """Use case: list/create/update/delete one catalog resource.

    Subclasses turn request payloads into column values in ``parse`` and may
    check references in ``check_references`` before any write.
    """

    resource: ClassVar[Resource]
    not_found_message: ClassVar[str] = "Registro no encontrado"

    def __init__(self, repo: CrudRepository[T]):
        self._repo = repo

    def parse(self, payload: Mapping[str, Any]) -> dict:
        raise NotImplementedError

    def check_references(self, values: dict) -> None:
        return None

    def list_page(self, *, current_role: Role, request: PageRequest, **filters: Any) -> Page[T]:
        require_access(current_role, self.resource, Action.VIEW)
        return self._repo.list_page(request, **filters)

    def list_options(self, *, current_role: Role, **filters: Any) -> Sequence[T]:
        require_access(current_role, self.resource, Action.VIEW)
        return self._repo.list_all(**filters)

    def get(self, *, current_role: Role, entity_id: int) -> T:
        require_access(current_role, self.resource, Action.VIEW)
        entity = self._repo.get_by_id(int(entity_id))
        if entity is None:
            raise NotFoundError(self.not_found_message)
        return entity

    def create(self, *, current_role: Role, payload: Mapping[str, Any]) -> T:
        require_access(current_role, self.resource, Action.CREATE)
        values = self.parse(payload)
        self.check_references(values)
        entity = self._repo.create(**values)
        logger.info("%s created: %s", self.resource.value, entity)
        return entity

    def update(self, *, current_role: Role, entity_id: int, payload: Mapping[str, Any]) -> T:
        require_access(current_role, self.resource, Action.EDIT)
        values = self.parse(payload)
        self.check_references(values)
        entity = self._repo.update(int(entity_id), **values)
        if entity is None:
            raise NotFoundError(self.not_found_message)
        logger.info("%s updated: %s", self.resource.value, entity)
        return entity

    def delete(self, *, current_role: Role, entity_id: int) -> None:
        require_access(current_role, self.resource, Action.DELETE)
        if not self._repo.delete_by_id(int(entity_id)):
            raise NotFoundError(self.not_found_message)
        logger.info("%s deleted: id=%s", self.resource.value, entity_id)
