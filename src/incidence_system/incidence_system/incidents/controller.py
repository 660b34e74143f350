from __future__ import annotations

from flask import Flask

from ..container import Container
from ..core.enums import Resource
from ..web.crud_routes import register_crud_api, register_list_page

COLUMNS = (
    ("Código", "incident_code"),
    ("Incidencia", "incident_name"),
    ("Estatus", "incident_status"),
)


def register(app: Flask, container: Container) -> None:
    service = container.incident_service

    register_crud_api(
        app,
        name="incidents",
        service=service,
        deleted_message="Incidencia eliminada correctamente",
    )
    register_list_page(
        app,
        path="/incidents",
        endpoint="incidents_page",
        title="Incidencias",
        resource=Resource.INCIDENTS,
        columns=COLUMNS,
        lister=lambda user, page_request: service.list_page(current_role=user.role, request=page_request),
    )
