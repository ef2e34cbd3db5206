"""Pagination & Sorting — pure arithmetic behind every search endpoint.

Invariants:
    - Pages are 1-based; offset = (page - 1) * limit
    - pages = max(1, ceil(records / limit)), so an empty result still reports one page
    - A sort key is honored only when its field is in the endpoint's allow-list;
      otherwise the endpoint default applies

Design Decisions:
    - Sort grammar accepts "field", "+field", "-field", "field asc", "field desc"
      because clients send all of these forms
"""

import math
from dataclasses import dataclass


DEFAULT_PAGE: int = 1
DEFAULT_LIMIT: int = 10


@dataclass(frozen=True)
class PageWindow:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class SortKey:
    field: str
    descending: bool = True


CREATED_AT_DESC = SortKey("created_at", descending=True)


def resolve_window(
    page: int | None, limit: int | None, default_limit: int = DEFAULT_LIMIT,
) -> PageWindow:
    """Apply defaults to optional page/limit request fields."""
    return PageWindow(
        page=page if page is not None else DEFAULT_PAGE,
        limit=limit if limit is not None else default_limit,
    )


def count_pages(records: int, limit: int) -> int:
    return max(1, math.ceil(records / limit))


def build_pagination(window: PageWindow, records: int) -> dict:
    """Pagination envelope: {current, limit, records, pages}."""
    return {
        "current": window.page,
        "limit": window.limit,
        "records": records,
        "pages": count_pages(records, window.limit),
    }


def parse_sort(raw: str | None) -> SortKey | None:
    """Parse a client sort string. Returns None when unparseable."""
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None

    parts = text.split()
    if len(parts) == 2:
        name, direction = parts[0], parts[1].lower()
        if direction not in ("asc", "desc"):
            return None
        return SortKey(name, descending=direction == "desc")
    if len(parts) != 1:
        return None

    if text[0] == "-":
        return SortKey(text[1:], descending=True) if len(text) > 1 else None
    if text[0] == "+":
        return SortKey(text[1:], descending=False) if len(text) > 1 else None
    return SortKey(text, descending=False)


def resolve_sort(
    raw: str | None,
    allowed: frozenset[str] | set[str] | tuple[str, ...],
    default: SortKey = CREATED_AT_DESC,
) -> SortKey:
    """Validate a client sort string against an allow-list, else default."""
    key = parse_sort(raw)
    if key is None or key.field not in allowed:
        return default
    return key
