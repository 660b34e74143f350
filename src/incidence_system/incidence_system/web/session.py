"""
Request guard and session helpers.

Every request outside the public paths must carry a valid ``token`` cookie.
The token subject is re-read from the database so deactivated users lose
access immediately and role changes take effect without a new login.
"""

from __future__ import annotations

from flask import Flask, Response, current_app, g, jsonify, redirect, request, url_for

from ..container import Container
from ..core.constants import SESSION_COOKIE_NAME
from ..core.enums import Resource
from ..core.exceptions import AuthenticationError, ValidationError
from ..core.permissions import menu_for
from ..users.service import SessionUser

PUBLIC_PATHS = ("/login", "/api/auth/login", "/static")

MENU_LINKS = {
    Resource.DASHBOARD: ("Inicio", "/"),
    Resource.COMPANIES: ("Empresas", "/companies"),
    Resource.OFFICES: ("Oficinas", "/offices"),
    Resource.EMPLOYEES: ("Empleados", "/employees"),
    Resource.INCIDENTS: ("Incidencias", "/incidents"),
    Resource.PERIODS: ("Periodos", "/periods"),
    Resource.MOVEMENTS: ("Movimientos", "/movimientos"),
    Resource.USERS: ("Usuarios", "/users"),
    Resource.REPORTS: ("Generar disco", "/generate-disk"),
}


def is_public_path(path: str) -> bool:
    return any(path == p or path.startswith(p + "/") for p in PUBLIC_PATHS)


def current_user() -> SessionUser:
    user = g.get("current_user")
    if user is None:
        raise AuthenticationError("No autenticado")
    return user


def json_body() -> dict:
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("El cuerpo de la petición debe ser un objeto JSON")
    return payload


def set_session_cookie(response: Response, token: str, max_age: int) -> Response:
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        max_age=max_age,
        httponly=True,
        samesite="Lax",
        secure=bool(current_app.config.get("SESSION_COOKIE_SECURE", False)),
        path="/",
    )
    return response


def clear_session_cookie(response: Response) -> Response:
    response.delete_cookie(SESSION_COOKIE_NAME, path="/")
    return response


def register(app: Flask, container: Container) -> None:
    def _load_user() -> SessionUser:
        claims = container.token_service.verify(request.cookies.get(SESSION_COOKIE_NAME))
        return SessionUser.from_user(container.auth_service.current_user(claims.user_id))

    @app.before_request
    def require_session():
        g.current_user = None
        path = request.path

        if is_public_path(path):
            if path == "/login" and request.cookies.get(SESSION_COOKIE_NAME):
                try:
                    g.current_user = _load_user()
                except AuthenticationError:
                    return None
                return redirect("/")
            return None

        try:
            g.current_user = _load_user()
        except AuthenticationError as e:
            if path.startswith("/api/"):
                return clear_session_cookie(jsonify({"message": str(e)})), 401
            return clear_session_cookie(redirect(url_for("login_page")))
        return None

    @app.context_processor
    def inject_session():
        user = g.get("current_user")
        if user is None:
            return {"current_user": None, "menu": []}
        return {
            "current_user": user.to_dict(),
            "menu": [MENU_LINKS[r] for r in menu_for(user.role) if r in MENU_LINKS],
        }
