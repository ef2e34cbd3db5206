"""Listing — the filter / paginate / map pipeline behind every search endpoint.

Invariants:
    - Only allow-listed columns are sortable; anything else falls back to the default
    - Rows are ordered by the sort key, then by id, so pages never overlap
    - A predicate builder given None contributes nothing to the WHERE clause
    - Soft-deleted rows are excluded unless the caller asks for DELETED or ALL
    - pages >= 1 even when records == 0

Design Decisions:
    - Count and page queries run one after the other on the request session:
      an AsyncSession cannot run two statements at once
    - Listing is a frozen dataclass per endpoint family, declared next to the
      router that uses it
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from pydantic import BaseModel
from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from shopping_mall.core.domain_types import SoftDeleteMode
from shopping_mall.core.pagination import (
    CREATED_AT_DESC, DEFAULT_LIMIT, SortKey, build_pagination,
    resolve_sort, resolve_window,
)
from shopping_mall.db.base import has_soft_delete
from shopping_mall.schemas.common import Page, PageRequest, Pagination

logger = logging.getLogger(__name__)

Predicate = ColumnElement[bool] | None


@dataclass(frozen=True)
class Listing:
    """What an endpoint searches and how it may be sorted."""
    model: type
    sortable: frozenset[str] = field(default_factory=lambda: frozenset({"created_at"}))
    default_sort: SortKey = CREATED_AT_DESC
    default_limit: int = DEFAULT_LIMIT


# ─── Predicate builders ─────────────────────────────────────────

def equals(column, value: Any) -> Predicate:
    return None if value is None else column == value


def contains(column, value: str | None) -> Predicate:
    return None if value is None else column.contains(value, autoescape=True)


def one_of(column, values: Iterable | None) -> Predicate:
    """Membership test; an empty or missing list means no filter."""
    values = list(values or ())
    return column.in_(values) if values else None


def at_least(column, value: Any) -> Predicate:
    return None if value is None else column >= value


def at_most(column, value: Any) -> Predicate:
    return None if value is None else column <= value


def search_any(columns: Iterable, text: str | None) -> Predicate:
    """Case-insensitive substring match on any of the columns."""
    if text is None or not text.strip():
        return None
    term = text.strip()
    return or_(*(c.icontains(term, autoescape=True) for c in columns))


def soft_delete_filter(model: type, mode: SoftDeleteMode) -> Predicate:
    if not has_soft_delete(model) or mode is SoftDeleteMode.ALL:
        return None
    if mode is SoftDeleteMode.DELETED:
        return model.deleted_at.is_not(None)
    return model.deleted_at.is_(None)


# ─── Pipeline ───────────────────────────────────────────────────

async def search_page(
    db: AsyncSession,
    listing: Listing,
    request: PageRequest,
    *predicates: Predicate,
    dto: type[BaseModel],
    deleted: SoftDeleteMode = SoftDeleteMode.LIVE,
) -> Page:
    """Count, fetch one page, and map rows to DTOs."""
    model = listing.model
    window = resolve_window(request.page, request.limit, listing.default_limit)
    sort = resolve_sort(request.sort, listing.sortable, listing.default_sort)

    conditions = [
        p for p in (*predicates, soft_delete_filter(model, deleted))
        if p is not None
    ]

    records = await db.scalar(
        select(func.count()).select_from(model).where(*conditions),
    ) or 0

    column = getattr(model, sort.field)
    result = await db.execute(
        select(model)
        .where(*conditions)
        .order_by(column.desc() if sort.descending else column.asc(), model.id)
        .offset(window.offset)
        .limit(window.limit),
    )
    rows = result.scalars().all()

    logger.debug(
        f"Listed {len(rows)} {model.__name__} rows",
        extra={"resource": model.__name__, "records": records},
    )
    return Page[dto](
        pagination=Pagination(**build_pagination(window, records)),
        data=[dto.model_validate(row) for row in rows],
    )
