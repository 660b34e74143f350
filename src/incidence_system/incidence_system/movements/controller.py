from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.enums import Action, Resource, Status
from ..core.permissions import require_access
from ..database.pagination import PageRequest
from ..web.crud_routes import entity_id_arg, optional_int_arg, register_list_page
from ..web.session import current_user, json_body

COLUMNS = (
    ("Fecha", "incidence_date"),
    ("Periodo", "period_name"),
    ("Código", "employee_code"),
    ("Empleado", "employee_name"),
    ("Oficina", "office_name"),
    ("Incidencia", "incident_name"),
    ("Observación", "incidence_observation"),
)


def _table_row(movement) -> dict:
    return {
        "id": movement.movement_id,
        "incidence_date": movement.incidence_date.isoformat(),
        "period_name": movement.period.period_name if movement.period else "",
        "employee_code": movement.employee.employee_code if movement.employee else "",
        "employee_name": movement.employee.employee_name if movement.employee else "",
        "office_name": movement.employee.office_name if movement.employee else "",
        "incident_name": movement.incident.incident_name if movement.incident else "",
        "incidence_observation": movement.incidence_observation,
    }


def register(app: Flask, container: Container) -> None:
    service = container.movement_service

    def list_visible(user, page_request):
        return service.list_movements(
            current_user=user,
            request=page_request,
            period_id=optional_int_arg("period_id", "periodId"),
            office_id=optional_int_arg("officeId", "office_id"),
        )

    @app.route("/api/movements", methods=["GET", "POST", "PUT", "DELETE"], endpoint="api_movements")
    def movements():
        user = current_user()

        if request.method == "GET":
            if request.args.get("id"):
                movement = service.get(current_user=user, movement_id=entity_id_arg())
                return jsonify(movement.to_dict())
            page = list_visible(user, PageRequest.from_args(request.args))
            return jsonify(page.to_dict("movements", lambda m: m.to_dict()))

        payload = json_body()
        if request.method == "POST":
            movement = service.create(current_user=user, payload=payload)
            return jsonify(movement.to_dict()), 201

        movement_id = entity_id_arg(payload)
        if request.method == "PUT":
            movement = service.update(current_user=user, movement_id=movement_id, payload=payload)
            return jsonify(movement.to_dict())

        service.delete(current_user=user, movement_id=movement_id)
        return jsonify({"message": "Movimiento eliminado correctamente"})

    @app.route("/api/movements/options", methods=["GET"], endpoint="api_movement_options")
    def movement_options():
        """Active periods, employees and incidents for the movement form."""
        user = current_user()
        require_access(user.role, Resource.MOVEMENTS, Action.CREATE)

        periods = container.period_service.list_options(current_role=user.role, status=Status.ACTIVE)
        incidents = container.incident_service.list_options(current_role=user.role, status=Status.ACTIVE)
        employees = container.employee_service.active_options(current_user=user)
        return jsonify(
            {
                "periods": [p.to_dict() for p in periods],
                "employees": [e.to_dict() for e in employees],
                "incidents": [i.to_dict() for i in incidents],
            }
        )

    register_list_page(
        app,
        path="/movimientos",
        endpoint="movements_page",
        title="Movimientos",
        resource=Resource.MOVEMENTS,
        columns=COLUMNS,
        lister=list_visible,
        to_row=_table_row,
    )
