from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from ..common.logging_config import get_logger
from ..core.enums import Action, Resource
from ..core.exceptions import ForbiddenError, NotFoundError
from ..core.permissions import require_access
from ..database.pagination import Page, PageRequest
from ..employees.model import Employee
from ..security.office_scope import OfficeScopeResolver
from ..users.service import SessionUser
from .model import Movement, MovementDraft
from .repository import MovementRepository
from .validator import MovementValidator

logger = get_logger(__name__)


class MovementService:
    """Use case: list and write movements for the session user."""

    def __init__(
        self,
        movements: MovementRepository,
        validator: MovementValidator,
        scope_resolver: OfficeScopeResolver,
    ):
        self._movements = movements
        self._validator = validator
        self._scopes = scope_resolver

    def list_movements(
        self,
        *,
        current_user: SessionUser,
        request: PageRequest,
        period_id: Optional[int] = None,
        office_id: Optional[int] = None,
    ) -> Page[Movement]:
        require_access(current_user.role, Resource.MOVEMENTS, Action.VIEW)
        if office_id is not None:
            require_access(current_user.role, Resource.MOVEMENTS, Action.FILTER_OFFICE)

        scope = self._scopes.resolve(user_id=current_user.user_id, requested_office_id=office_id)
        return self._movements.list_page(request, office_ids=scope.office_ids, period_id=period_id)

    def get(self, *, current_user: SessionUser, movement_id: int) -> Movement:
        require_access(current_user.role, Resource.MOVEMENTS, Action.VIEW)
        movement = self._movements.get_by_id(int(movement_id))
        if movement is None:
            raise NotFoundError("Movimiento no encontrado")
        self._require_office(current_user, movement.employee.office_id if movement.employee else None)
        return movement

    def create(self, *, current_user: SessionUser, payload: Mapping[str, Any]) -> Movement:
        require_access(current_user.role, Resource.MOVEMENTS, Action.CREATE)
        draft = MovementDraft.from_payload(payload)

        self._validator.validate(draft, authorize=self._office_guard(current_user))

        movement = self._movements.create(draft)
        logger.info("movement %s created by user %s", movement.movement_id, current_user.user_id)
        return movement

    def update(self, *, current_user: SessionUser, movement_id: int, payload: Mapping[str, Any]) -> Movement:
        require_access(current_user.role, Resource.MOVEMENTS, Action.EDIT)
        existing = self.get(current_user=current_user, movement_id=movement_id)

        draft = MovementDraft.from_payload(payload)
        self._validator.validate(
            draft,
            exclude_id=existing.movement_id,
            authorize=self._office_guard(current_user),
        )

        movement = self._movements.update(existing.movement_id, draft)
        if movement is None:
            raise NotFoundError("Movimiento no encontrado")
        logger.info("movement %s updated by user %s", movement.movement_id, current_user.user_id)
        return movement

    def delete(self, *, current_user: SessionUser, movement_id: int) -> None:
        require_access(current_user.role, Resource.MOVEMENTS, Action.DELETE)
        movement = self.get(current_user=current_user, movement_id=movement_id)
        if not self._movements.delete_by_id(movement.movement_id):
            raise NotFoundError("Movimiento no encontrado")
        logger.info("movement %s deleted by user %s", movement.movement_id, current_user.user_id)

    def _office_guard(self, current_user: SessionUser) -> Callable[[Employee], None]:
        return lambda employee: self._require_office(current_user, employee.office_id)

    def _require_office(self, current_user: SessionUser, office_id: Optional[int]) -> None:
        scope = self._scopes.resolve(user_id=current_user.user_id)
        if scope.is_unrestricted:
            return
        if office_id is None or not scope.allows(office_id):
            raise ForbiddenError("No tienes acceso a la oficina de este empleado")
