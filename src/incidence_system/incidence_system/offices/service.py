from __future__ import annotations

from typing import Any, Mapping

from ..common.catalog_service import CatalogService
from ..common.repository import CrudRepository
from ..common.validators import require_enum, require_non_empty, require_positive_int
from ..companies.model import Company
from ..core.enums import Resource, Status
from ..core.exceptions import NotFoundError
from .model import Office


class OfficeService(CatalogService[Office]):
    resource = Resource.OFFICES
    not_found_message = "Oficina no encontrada"

    def __init__(self, offices: CrudRepository[Office], companies: CrudRepository[Company]):
        super().__init__(offices)
        self._companies = companies

    def parse(self, payload: Mapping[str, Any]) -> dict:
        return {
            "company_id": require_positive_int(payload.get("company_id"), "Empresa"),
            "office_name": require_non_empty(payload.get("office_name"), "Nombre de la oficina"),
            "office_status": require_enum(payload.get("office_status", Status.ACTIVE.value), Status, "Estatus"),
        }

    def check_references(self, values: dict) -> None:
        if self._companies.get_by_id(values["company_id"]) is None:
            raise NotFoundError("Empresa no encontrada")
