from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.catalog_service import CatalogService
from ..common.repository import CrudRepository
from ..common.validators import require_enum, require_non_empty, require_positive_int
from ..core.enums import EmployeeType, Resource, Status
from ..core.exceptions import NotFoundError
from ..database.pagination import Page, PageRequest
from ..offices.model import Office
from ..security.office_scope import OfficeScopeResolver
from ..users.service import SessionUser
from .model import Employee


class EmployeeService(CatalogService[Employee]):
    resource = Resource.EMPLOYEES
    not_found_message = "Empleado no encontrado"

    def __init__(
        self,
        employees: CrudRepository[Employee],
        offices: CrudRepository[Office],
        scope_resolver: OfficeScopeResolver,
    ):
        super().__init__(employees)
        self._offices = offices
        self._scopes = scope_resolver

    def parse(self, payload: Mapping[str, Any]) -> dict:
        return {
            "office_id": require_positive_int(payload.get("office_id"), "Oficina"),
            "employee_code": require_positive_int(payload.get("employee_code"), "Código de empleado"),
            "employee_name": require_non_empty(payload.get("employee_name"), "Nombre del empleado"),
            "employee_type": require_enum(payload.get("employee_type"), EmployeeType, "Tipo de empleado"),
            "employee_status": require_enum(payload.get("employee_status", Status.ACTIVE.value), Status, "Estatus"),
        }

    def check_references(self, values: dict) -> None:
        if self._offices.get_by_id(values["office_id"]) is None:
            raise NotFoundError("Oficina no encontrada")

    def list_scoped(
        self,
        *,
        current_user: SessionUser,
        request: PageRequest,
        office_id: Optional[int] = None,
    ) -> Page[Employee]:
        """Employees visible to the user, optionally narrowed to one office."""
        scope = self._scopes.resolve(user_id=current_user.user_id, requested_office_id=office_id)
        return self.list_page(current_role=current_user.role, request=request, office_ids=scope.office_ids)

    def active_options(self, *, current_user: SessionUser) -> Sequence[Employee]:
        scope = self._scopes.resolve(user_id=current_user.user_id)
        return self.list_options(current_role=current_user.role, office_ids=scope.office_ids, status=Status.ACTIVE)
