from __future__ import annotations

from typing import Any, Mapping

from ..common.catalog_service import CatalogService
from ..common.validators import require_enum, require_non_empty
from ..core.enums import Resource, Status
from .model import Company


class CompanyService(CatalogService[Company]):
    resource = Resource.COMPANIES
    not_found_message = "Empresa no encontrada"

    def parse(self, payload: Mapping[str, Any]) -> dict:
        return {
            "company_name": require_non_empty(payload.get("company_name"), "Nombre de la empresa"),
            "company_status": require_enum(payload.get("company_status", Status.ACTIVE.value), Status, "Estatus"),
        }
