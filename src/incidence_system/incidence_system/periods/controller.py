from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..core.enums import Resource
from ..core.permissions import require_access
from ..web.crud_routes import register_crud_api, register_list_page
from ..web.session import current_user

COLUMNS = (
    ("Periodo", "period_name"),
    ("Inicio", "period_start"),
    ("Fin", "period_end"),
    ("Estatus", "period_status"),
)


def register(app: Flask, container: Container) -> None:
    service = container.period_service

    @app.route("/api/periods/current", methods=["GET"], endpoint="api_current_period")
    def current_period():
        require_access(current_user().role, Resource.DASHBOARD)
        return jsonify(service.current().to_dict())

    register_crud_api(
        app,
        name="periods",
        service=service,
        deleted_message="Periodo eliminado correctamente",
    )
    register_list_page(
        app,
        path="/periods",
        endpoint="periods_page",
        title="Periodos",
        resource=Resource.PERIODS,
        columns=COLUMNS,
        lister=lambda user, page_request: service.list_page(current_role=user.role, request=page_request),
    )
