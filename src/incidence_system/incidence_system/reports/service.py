from __future__ import annotations

import io
import re
from dataclasses import dataclass
from typing import Dict, Iterable

import pandas as pd

from ..common.logging_config import get_logger
from ..core.constants import EXPORT_COLUMNS
from ..core.enums import Action, Resource, Role
from ..core.exceptions import NotFoundError, ValidationError
from ..core.permissions import require_access
from ..database.pagination import Page, PageRequest
from ..movements.repository import MovementRepository
from ..periods.model import Period
from ..periods.repository import PeriodRepository

logger = get_logger(__name__)

CSV_MIMETYPE = "text/csv"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@dataclass(frozen=True)
class ExportFile:
    filename: str
    mimetype: str
    content: bytes


def _safe_filename(name: str) -> str:
    return re.sub(r"[^A-Za-z0-9_.-]+", "_", name).strip("_") or "periodo"


class PeriodExportService:
    """Use case: per-period movement counts and the payroll "disk" file."""

    def __init__(self, periods: PeriodRepository, movements: MovementRepository):
        self._periods = periods
        self._movements = movements

    def list_periods(self, *, current_role: Role, request: PageRequest) -> Page[Period]:
        require_access(current_role, Resource.REPORTS, Action.VIEW)
        return self._periods.list_page(request)

    def count_active(self, *, current_role: Role, period_ids: Iterable[int]) -> Dict[str, int]:
        require_access(current_role, Resource.REPORTS, Action.VIEW)
        counts = self._movements.count_active_by_period(period_ids)
        return {str(k): v for k, v in counts.items()}

    def build_frame(self, period: Period) -> pd.DataFrame:
        rows = [
            (period.period_name, m.employee.employee_code, m.incident.incident_code)
            for m in self._movements.list_active_for_period(period.period_id)
            if m.employee is not None and m.incident is not None
        ]
        return pd.DataFrame(rows, columns=list(EXPORT_COLUMNS))

    def export(self, *, current_role: Role, period_id: int, fmt: str = "csv") -> ExportFile:
        require_access(current_role, Resource.REPORTS, Action.EXPORT)
        fmt = (fmt or "csv").lower()
        if fmt not in ("csv", "xlsx"):
            raise ValidationError("Formato no soportado (usa csv o xlsx)")

        period = self._periods.get_by_id(int(period_id))
        if period is None:
            raise NotFoundError("Periodo no encontrado")
        df = self.build_frame(period)
        base_name = f"periodo_{_safe_filename(period.period_name)}"

        if fmt == "xlsx":
            out = io.BytesIO()
            with pd.ExcelWriter(out, engine="openpyxl") as writer:
                df.to_excel(writer, index=False, sheet_name="movimientos")
            content = out.getvalue()
            result = ExportFile(filename=f"{base_name}.xlsx", mimetype=XLSX_MIMETYPE, content=content)
        else:
            content = df.to_csv(index=False, lineterminator="\n").encode("utf-8")
            result = ExportFile(filename=f"{base_name}.csv", mimetype=CSV_MIMETYPE, content=content)

        logger.info("period %s exported as %s (%s rows)", period.period_id, fmt, len(df))
        return result
