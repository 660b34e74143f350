from __future__ import annotations

import io

from flask import Flask, jsonify, render_template, request, send_file

from ..common.validators import require_positive_int
from ..container import Container
from ..core.enums import Action, Resource
from ..core.exceptions import ValidationError
from ..core.permissions import can_access
from ..database.pagination import PageRequest
from ..web.session import current_user


def _period_ids(raw: str) -> list[int]:
    return [require_positive_int(part, "ids") for part in raw.split(",") if part.strip()]


def register(app: Flask, container: Container) -> None:
    service = container.export_service

    @app.route("/api/generate-disk/counts", methods=["GET"], endpoint="api_export_counts")
    def export_counts():
        counts = service.count_active(
            current_role=current_user().role,
            period_ids=_period_ids(request.args.get("ids", "")),
        )
        return jsonify({"counts": counts})

    @app.route("/api/generate-disk/download", methods=["GET"], endpoint="api_export_download")
    def export_download():
        raw_id = request.args.get("periodId") or request.args.get("period_id")
        if not raw_id:
            raise ValidationError("periodId es requerido")

        export = service.export(
            current_role=current_user().role,
            period_id=require_positive_int(raw_id, "periodId"),
            fmt=request.args.get("format", "csv"),
        )
        return send_file(
            io.BytesIO(export.content),
            mimetype=export.mimetype,
            as_attachment=True,
            download_name=export.filename,
        )

    @app.route("/generate-disk", methods=["GET"], endpoint="export_page")
    def export_page():
        user = current_user()
        page_request = PageRequest.from_args(request.args)
        page = service.list_periods(current_role=user.role, request=page_request)
        counts = service.count_active(current_role=user.role, period_ids=[p.period_id for p in page.items])
        return render_template(
            "generate_disk.html",
            periods=page.items,
            counts=counts,
            page=page,
            search=page_request.search,
            can_export=can_access(user.role, Resource.REPORTS, Action.EXPORT),
            active_page="export_page",
        )
