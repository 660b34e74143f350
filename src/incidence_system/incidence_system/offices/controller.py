from __future__ import annotations

from flask import Flask

from ..container import Container
from ..core.enums import Resource
from ..web.crud_routes import register_crud_api, register_list_page

COLUMNS = (
    ("ID", "id"),
    ("Oficina", "office_name"),
    ("Empresa", "company_name"),
    ("Estatus", "office_status"),
)


def register(app: Flask, container: Container) -> None:
    service = container.office_service

    register_crud_api(
        app,
        name="offices",
        service=service,
        deleted_message="Oficina eliminada correctamente",
    )
    register_list_page(
        app,
        path="/offices",
        endpoint="offices_page",
        title="Oficinas",
        resource=Resource.OFFICES,
        columns=COLUMNS,
        lister=lambda user, page_request: service.list_page(current_role=user.role, request=page_request),
    )
