from __future__ import annotations

from flask import Flask, render_template

from ..container import Container
from ..core.enums import Action, Resource
from ..core.exceptions import ForbiddenError, NotFoundError
from ..core.permissions import can_access, require_access
from ..database.pagination import PageRequest
from .session import current_user

_COUNT_ONLY = PageRequest(page=1, page_size=1)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="dashboard")
    def dashboard():
        user = current_user()
        require_access(user.role, Resource.DASHBOARD, Action.VIEW)

        try:
            period = container.period_service.current()
        except NotFoundError:
            period = None

        cards = {"employees": None, "incidents": None, "movements": None}
        try:
            cards["employees"] = container.employee_service.list_scoped(current_user=user, request=_COUNT_ONLY).total
            if period is not None:
                cards["movements"] = container.movement_service.list_movements(
                    current_user=user, request=_COUNT_ONLY, period_id=period.period_id
                ).total
        except ForbiddenError:
            # users without linked offices still get the overview page
            pass

        if can_access(user.role, Resource.INCIDENTS, Action.VIEW):
            cards["incidents"] = container.incident_service.list_page(
                current_role=user.role, request=_COUNT_ONLY
            ).total

        return render_template("dashboard.html", cards=cards, period=period, active_page="dashboard")
