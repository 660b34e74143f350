"""
Route factory shared by the catalog resources.

``register_crud_api`` exposes ``GET/POST/PUT/DELETE /api/<name>`` on top of a
``CatalogService``; ``register_list_page`` renders the same listing as an
HTML table.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Sequence, Tuple

from flask import Flask, jsonify, render_template, request

from ..common.catalog_service import CatalogService
from ..common.validators import optional_positive_int, require_positive_int
from ..core.enums import Action, Resource
from ..core.exceptions import ValidationError
from ..core.permissions import can_access, require_access
from ..database.pagination import Page, PageRequest
from ..users.service import SessionUser
from .session import current_user, json_body

Lister = Callable[[SessionUser, PageRequest], Page]
Columns = Sequence[Tuple[str, str]]


def entity_id_arg(payload: Optional[Mapping[str, Any]] = None) -> int:
    """The target id from ``?id=`` or, failing that, from the JSON body."""
    raw = request.args.get("id")
    if (raw is None or raw == "") and payload:
        raw = payload.get("id")
    if raw is None or raw == "":
        raise ValidationError("El id es requerido")
    return require_positive_int(raw, "id")


def optional_int_arg(*names: str) -> Optional[int]:
    for name in names:
        value = request.args.get(name)
        if value not in (None, ""):
            return optional_positive_int(value, name)
    return None


def register_crud_api(
    app: Flask,
    *,
    name: str,
    service: CatalogService,
    deleted_message: str,
    lister: Optional[Lister] = None,
    delete_kwargs: Optional[Callable[[SessionUser], dict]] = None,
) -> None:
    def _list(user: SessionUser, page_request: PageRequest) -> Page:
        if lister is not None:
            return lister(user, page_request)
        return service.list_page(current_role=user.role, request=page_request)

    def collection():
        user = current_user()

        if request.method == "GET":
            page = _list(user, PageRequest.from_args(request.args))
            return jsonify(page.to_dict(name, lambda e: e.to_dict()))

        payload = json_body()
        if request.method == "POST":
            entity = service.create(current_role=user.role, payload=payload)
            return jsonify(entity.to_dict()), 201

        entity_id = entity_id_arg(payload)
        if request.method == "PUT":
            entity = service.update(current_role=user.role, entity_id=entity_id, payload=payload)
            return jsonify(entity.to_dict())

        extra = delete_kwargs(user) if delete_kwargs is not None else {}
        service.delete(current_role=user.role, entity_id=entity_id, **extra)
        return jsonify({"message": deleted_message})

    app.add_url_rule(
        f"/api/{name}",
        endpoint=f"api_{name}",
        view_func=collection,
        methods=["GET", "POST", "PUT", "DELETE"],
    )


def register_list_page(
    app: Flask,
    *,
    path: str,
    endpoint: str,
    title: str,
    resource: Resource,
    columns: Columns,
    lister: Lister,
    to_row: Callable[[Any], dict] = lambda item: item.to_dict(),
) -> None:
    def page_view():
        user = current_user()
        require_access(user.role, resource, Action.VIEW)
        page_request = PageRequest.from_args(request.args)
        page = lister(user, page_request)
        return render_template(
            "entity_list.html",
            title=title,
            columns=columns,
            rows=[to_row(item) for item in page.items],
            page=page,
            search=page_request.search,
            can_create=can_access(user.role, resource, Action.CREATE),
            active_page=endpoint,
        )

    app.add_url_rule(path, endpoint=endpoint, view_func=page_view, methods=["GET"])
