from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Mapping, Sequence, TypeVar

from sqlalchemy import Select, func, or_, select
from sqlalchemy.orm import Session

from ..core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ..core.exceptions import ValidationError

T = TypeVar("T")


def _as_int(value: Any, field_name: str, default: int) -> int:
    if value is None or str(value).strip() == "":
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} debe ser numérico")


@dataclass(frozen=True)
class PageRequest:
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    search: str = ""

    def __post_init__(self):
        if self.page < 1:
            raise ValidationError("page debe ser mayor o igual a 1")
        if self.page_size < 1:
            raise ValidationError("pageSize debe ser mayor o igual a 1")

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "PageRequest":
        """Build from query-string style arguments (``page``, ``pageSize``, ``search``)."""
        page = _as_int(args.get("page"), "page", 1)
        page_size = min(_as_int(args.get("pageSize"), "pageSize", DEFAULT_PAGE_SIZE), MAX_PAGE_SIZE)
        search = str(args.get("search") or "").strip()
        return cls(page=page, page_size=page_size, search=search)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.page_size else 0

    def to_dict(self, key: str, serialize: Callable[[T], dict]) -> dict:
        return {
            key: [serialize(i) for i in self.items],
            "total": self.total,
            "page": self.page,
            "pageSize": self.page_size,
            "totalPages": self.total_pages,
        }


def search_clause(search: str, columns: Sequence[Any]):
    """Case-insensitive substring match over any of ``columns``."""
    return or_(*[col.icontains(search, autoescape=True) for col in columns])


def paginate(
    session: Session,
    stmt: Select,
    *,
    request: PageRequest,
    search_columns: Sequence[Any] = (),
    order_by: Sequence[Any] = (),
    convert: Callable[[Any], T],
) -> Page[T]:
    """Run ``stmt`` as one page plus a total count.

    ``stmt`` must select a single ORM entity; extra filters (office scope,
    period filter, ...) are applied by the caller before handing it over.
    """
    if request.search and search_columns:
        stmt = stmt.where(search_clause(request.search, search_columns))

    total = session.scalar(select(func.count()).select_from(stmt.order_by(None).subquery())) or 0

    rows = session.scalars(stmt.order_by(*order_by).offset(request.offset).limit(request.page_size)).unique().all()
    return Page(items=[convert(r) for r in rows], total=int(total), page=request.page, page_size=request.page_size)
