from __future__ import annotations

from flask import Flask, flash, jsonify, make_response, redirect, render_template, request, url_for

from ..common.logging_config import get_logger
from ..container import Container
from ..core.enums import Resource
from ..core.exceptions import AuthenticationError, ValidationError
from ..web.crud_routes import register_crud_api, register_list_page
from ..web.session import clear_session_cookie, current_user, json_body, set_session_cookie

logger = get_logger(__name__)

COLUMNS = (
    ("Nombre", "user_name"),
    ("Email", "user_email"),
    ("Rol", "user_role_label"),
    ("Estatus", "user_status"),
)


def register(app: Flask, container: Container) -> None:
    auth = container.auth_service
    tokens = container.token_service
    service = container.user_service

    @app.route("/login", methods=["GET", "POST"], endpoint="login_page")
    def login_page():
        if request.method == "POST":
            try:
                s_user = auth.authenticate(request.form.get("email", ""), request.form.get("password", ""))
                response = make_response(redirect("/"))
                return set_session_cookie(response, tokens.issue(s_user), tokens.ttl_seconds)
            except (ValidationError, AuthenticationError) as e:
                flash(str(e), "danger")

        return render_template("login.html")

    @app.route("/logout", methods=["GET"], endpoint="logout")
    def logout():
        flash("Sesión cerrada.", "info")
        return clear_session_cookie(redirect(url_for("login_page")))

    @app.route("/api/auth/login", methods=["POST"], endpoint="api_login")
    def api_login():
        payload = json_body()
        s_user = auth.authenticate(payload.get("email"), payload.get("password"))
        response = jsonify({"message": "Inicio de sesión exitoso", "user": s_user.to_dict()})
        return set_session_cookie(response, tokens.issue(s_user), tokens.ttl_seconds)

    @app.route("/api/auth/logout", methods=["POST"], endpoint="api_logout")
    def api_logout():
        logger.info("user %s logged out", current_user().user_id)
        return clear_session_cookie(jsonify({"message": "Sesión cerrada"}))

    @app.route("/api/auth/me", methods=["GET"], endpoint="api_me")
    def api_me():
        return jsonify({"user": current_user().to_dict()})

    @app.route("/api/user/offices", methods=["GET"], endpoint="api_user_offices")
    def api_user_offices():
        offices = auth.offices_for(current_user().user_id)
        return jsonify({"offices": [o.to_dict() for o in offices]})

    register_crud_api(
        app,
        name="users",
        service=service,
        deleted_message="Usuario eliminado correctamente",
        delete_kwargs=lambda user: {"current_user_id": user.user_id},
    )
    register_list_page(
        app,
        path="/users",
        endpoint="users_page",
        title="Usuarios",
        resource=Resource.USERS,
        columns=COLUMNS,
        lister=lambda user, page_request: service.list_page(current_role=user.role, request=page_request),
    )
