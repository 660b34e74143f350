from __future__ import annotations

from flask import Flask

from ..container import Container
from ..core.enums import Resource
from ..web.crud_routes import optional_int_arg, register_crud_api, register_list_page

COLUMNS = (
    ("Código", "employee_code"),
    ("Nombre", "employee_name"),
    ("Oficina", "office_name"),
    ("Tipo", "employee_type"),
    ("Estatus", "employee_status"),
)


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    def list_visible(user, page_request):
        return service.list_scoped(
            current_user=user,
            request=page_request,
            office_id=optional_int_arg("officeId", "office_id"),
        )

    register_crud_api(
        app,
        name="employees",
        service=service,
        deleted_message="Empleado eliminado correctamente",
        lister=list_visible,
    )
    register_list_page(
        app,
        path="/employees",
        endpoint="employees_page",
        title="Empleados",
        resource=Resource.EMPLOYEES,
        columns=COLUMNS,
        lister=list_visible,
    )
