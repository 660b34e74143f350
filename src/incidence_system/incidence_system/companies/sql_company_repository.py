from __future__ import annotations

from ..core.enums import Status
from ..database.crud import SqlCrudRepository
from ..database.orm import CompanyRow
from .model import Company


class SqlCompanyRepository(SqlCrudRepository[CompanyRow, Company]):
    model = CompanyRow
    search_columns = (CompanyRow.company_name,)
    order_by = (CompanyRow.created_at.desc(), CompanyRow.id.desc())
    in_use_message = "No se puede eliminar la empresa: tiene oficinas o usuarios asociados"

    def to_domain(self, row: CompanyRow) -> Company:
        return Company(
            company_id=int(row.id),
            company_name=row.company_name,
            company_status=Status(row.company_status),
            created_at=row.created_at,
        )
