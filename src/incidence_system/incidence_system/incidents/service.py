from __future__ import annotations

from typing import Any, Mapping

from ..common.catalog_service import CatalogService
from ..common.validators import require_enum, require_non_empty
from ..core.enums import Resource, Status
from .model import Incident


class IncidentService(CatalogService[Incident]):
    resource = Resource.INCIDENTS
    not_found_message = "Incidencia no encontrada"

    def parse(self, payload: Mapping[str, Any]) -> dict:
        return {
            "incident_code": require_non_empty(payload.get("incident_code"), "Código de la incidencia").upper(),
            "incident_name": require_non_empty(payload.get("incident_name"), "Nombre de la incidencia"),
            "incident_status": require_enum(payload.get("incident_status", Status.ACTIVE.value), Status, "Estatus"),
        }
