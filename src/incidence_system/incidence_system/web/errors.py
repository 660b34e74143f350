from __future__ import annotations

from flask import Flask, g, jsonify, redirect, render_template, request, url_for
from werkzeug.exceptions import HTTPException

from ..common.logging_config import get_logger
from ..core.exceptions import AuthenticationError, DomainError, ForbiddenError

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Error interno del servidor."


def wants_json() -> bool:
    return request.path.startswith("/api/")


def _current_user_dict():
    user = g.get("current_user")
    return user.to_dict() if user is not None else None


def register_error_handlers(app: Flask) -> None:
    """Map domain errors to HTTP responses: JSON under /api, pages elsewhere."""

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        if wants_json():
            return jsonify({"message": str(e)}), e.status_code

        if isinstance(e, AuthenticationError):
            return redirect(url_for("login_page"))
        if isinstance(e, ForbiddenError):
            return render_template("403.html", current_user=_current_user_dict(), message=str(e)), 403
        return (
            render_template("error.html", current_user=_current_user_dict(), message=str(e), status=e.status_code),
            e.status_code,
        )

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        if wants_json():
            return jsonify({"message": e.description}), e.code
        return e

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.path)
        if wants_json():
            return jsonify({"message": INTERNAL_ERROR_MESSAGE}), 500
        return (
            render_template("error.html", current_user=_current_user_dict(), message=INTERNAL_ERROR_MESSAGE, status=500),
            500,
        )
