# app/core/pagination.py
"""Page envelope helpers.

Everything here is pure: the envelope is computed from the total number of
records, the requested page, the page size and the listing's base URL, so it
can be tested without a database.
"""
from typing import Any

DEFAULT_PAGE = 1


def resolve_page(raw: str | int | None) -> int:
    """Turn a ``page`` query value into a page number.

    Anything that is not a positive integer falls back to the first page.
    """
    if raw is None:
        return DEFAULT_PAGE
    try:
        page = int(str(raw).strip())
    except ValueError:
        return DEFAULT_PAGE
    return page if page >= 1 else DEFAULT_PAGE


def page_url(path: str, page: int) -> str:
    return f"{path}?page={page}"


def page_offset(page: int, per_page: int) -> int:
    return (page - 1) * per_page


def build_page_meta(total: int, page: int, per_page: int, path: str) -> dict[str, Any]:
    """Build every envelope key except ``data``.

    ``from``/``to`` are 1-based positions of the first and last item on the
    page and are both ``None`` when the page holds nothing.
    """
    offset = page_offset(page, per_page)
    count = max(0, min(per_page, total - offset))

    return {
        "current_page": page,
        "first_page_url": page_url(path, 1),
        "from": offset + 1 if count else None,
        "next_page_url": page_url(path, page + 1) if total > page * per_page else None,
        "path": path,
        "per_page": per_page,
        "prev_page_url": page_url(path, page - 1) if page > 1 else None,
        "to": offset + count if count else None,
    }
