from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional

from ..common.catalog_service import CatalogService
from ..common.datetime_utils import parse_iso_date, today
from ..common.validators import require_enum, require_non_empty
from ..core.enums import Resource, Status
from ..core.exceptions import NotFoundError, ValidationError
from .model import Period
from .repository import PeriodRepository


class PeriodService(CatalogService[Period]):
    resource = Resource.PERIODS
    not_found_message = "Periodo no encontrado"

    def __init__(self, periods: PeriodRepository):
        super().__init__(periods)
        self._periods = periods

    def parse(self, payload: Mapping[str, Any]) -> dict:
        start = parse_iso_date(payload.get("period_start"), "Fecha de inicio")
        end = parse_iso_date(payload.get("period_end"), "Fecha de fin")
        if start > end:
            raise ValidationError("La fecha de inicio debe ser anterior o igual a la fecha de fin")
        return {
            "period_name": require_non_empty(payload.get("period_name"), "Nombre del periodo"),
            "period_start": start,
            "period_end": end,
            "period_status": require_enum(payload.get("period_status", Status.ACTIVE.value), Status, "Estatus"),
        }

    def current(self, *, on: Optional[date] = None) -> Period:
        period = self._periods.get_current(on=on or today())
        if period is None:
            raise NotFoundError("No hay periodo actual")
        return period
