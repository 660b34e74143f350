"""Role permission table.

Every rule is a ``(Role, Resource, Action)`` tuple; anything not listed is denied.
"""
from __future__ import annotations

from typing import FrozenSet, Iterable, Optional, Tuple

from .enums import Action, Resource, Role
from .exceptions import ForbiddenError

Rule = Tuple[Role, Resource, Action]

_ALL_ROLES = tuple(Role)
_HR_ROLES = (Role.SUPER_ADMIN, Role.ENCARGADO_RRHH)
_WRITE_ACTIONS = (Action.VIEW, Action.CREATE, Action.EDIT, Action.DELETE)


def _grant(roles: Iterable[Role], resource: Resource, actions: Iterable[Action]) -> set[Rule]:
    return {(role, resource, action) for role in roles for action in actions}


def _build_table() -> FrozenSet[Rule]:
    rules: set[Rule] = set()

    rules |= _grant(_ALL_ROLES, Resource.DASHBOARD, [Action.VIEW])

    for resource in (Resource.COMPANIES, Resource.OFFICES, Resource.PERIODS, Resource.INCIDENTS):
        rules |= _grant(_HR_ROLES, resource, _WRITE_ACTIONS)

    rules |= _grant(_ALL_ROLES, Resource.EMPLOYEES, [Action.VIEW, Action.FILTER_OFFICE])
    rules |= _grant(_HR_ROLES, Resource.EMPLOYEES, [Action.CREATE, Action.EDIT, Action.DELETE])

    rules |= _grant([Role.SUPER_ADMIN], Resource.USERS, _WRITE_ACTIONS)

    rules |= _grant(_ALL_ROLES, Resource.MOVEMENTS, [Action.VIEW, Action.FILTER_OFFICE])
    rules |= _grant(_HR_ROLES, Resource.MOVEMENTS, [Action.CREATE, Action.EDIT, Action.DELETE])

    rules |= _grant(
        (Role.SUPER_ADMIN, Role.ENCARGADO_RRHH, Role.SUPERVISOR_REGIONES),
        Resource.REPORTS,
        [Action.VIEW, Action.EXPORT],
    )
    return frozenset(rules)


PERMISSIONS: FrozenSet[Rule] = _build_table()


def can_access(role: Optional[Role], resource: Resource, action: Action = Action.VIEW) -> bool:
    if role is None:
        return False
    return (role, resource, action) in PERMISSIONS


def require_access(role: Optional[Role], resource: Resource, action: Action = Action.VIEW) -> None:
    if not can_access(role, resource, action):
        raise ForbiddenError("No tienes permiso para realizar esta acción")


def menu_for(role: Optional[Role]) -> list[Resource]:
    """Resources the role may open from the navigation bar, in display order."""
    return [resource for resource in Resource if can_access(role, resource, Action.VIEW)]
