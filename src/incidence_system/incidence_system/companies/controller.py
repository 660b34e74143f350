from __future__ import annotations

from flask import Flask

from ..container import Container
from ..core.enums import Resource
from ..web.crud_routes import register_crud_api, register_list_page

COLUMNS = (
    ("ID", "id"),
    ("Empresa", "company_name"),
    ("Estatus", "company_status"),
)


def register(app: Flask, container: Container) -> None:
    service = container.company_service

    register_crud_api(
        app,
        name="companies",
        service=service,
        deleted_message="Empresa eliminada correctamente",
    )
    register_list_page(
        app,
        path="/companies",
        endpoint="companies_page",
        title="Empresas",
        resource=Resource.COMPANIES,
        columns=COLUMNS,
        lister=lambda user, page_request: service.list_page(current_role=user.role, request=page_request),
    )
