"""
Pagination helpers.

PageRequest mirrors the ``page`` / ``size`` / ``sort`` query parameters the
list and search endpoints accept; Page is what the repositories return.
The header builders produce the ``X-Total-Count`` and RFC 5988 ``Link``
headers clients use to walk the result set.
"""
import math
from typing import Any, List, Tuple
from urllib.parse import quote

from pydantic import BaseModel, Field


SORT_DIRECTIONS = ("asc", "desc")


class PageRequest(BaseModel):
    """Zero-based page index, page size and (property, direction) sort keys."""
    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, ge=1)
    sort: List[Tuple[str, str]] = Field(default_factory=list)

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def from_args(cls, args, default_size: int = 20, max_size: int = 2000) -> "PageRequest":
        """
        Build a PageRequest from request query args.

        Unparseable or out-of-range values fall back to the defaults instead of
        failing the request; ``size`` is capped at ``max_size``.

        Examples:
            ?page=2&size=10
            ?sort=date,desc&sort=title
        """
        page = _parse_int(args.get('page'), 0)
        if page < 0:
            page = 0

        size = _parse_int(args.get('size'), default_size)
        if size < 1:
            size = default_size
        size = min(size, max_size)

        sort = []
        for raw in args.getlist('sort') if hasattr(args, 'getlist') else []:
            parts = [p.strip() for p in raw.split(',') if p.strip()]
            if not parts:
                continue
            direction = "asc"
            if parts[-1].lower() in SORT_DIRECTIONS:
                direction = parts.pop().lower()
            for prop in parts:
                sort.append((prop, direction))

        return cls(page=page, size=size, sort=sort)


class Page(BaseModel):
    """One page of results plus the total number of matches."""
    content: List[Any] = Field(default_factory=list)
    total: int = 0
    page: int = 0
    size: int = 20

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return int(math.ceil(self.total / self.size))


def _parse_int(value, default: int) -> int:
    if value is None or value == '':
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _generate_uri(base_url: str, page: int, size: int, query: str = None) -> str:
    uri = f"{base_url}?page={page}&size={size}"
    if query is not None:
        uri += f"&query={quote(query, safe='')}"
    return uri


def _build_link_header(page: Page, base_url: str, query: str = None) -> str:
    link = ""
    if page.page + 1 < page.total_pages:
        link = f'<{_generate_uri(base_url, page.page + 1, page.size, query)}>; rel="next",'
    if page.page > 0:
        link += f'<{_generate_uri(base_url, page.page - 1, page.size, query)}>; rel="prev",'

    last_page = page.total_pages - 1 if page.total_pages > 0 else 0
    link += f'<{_generate_uri(base_url, last_page, page.size, query)}>; rel="last",'
    link += f'<{_generate_uri(base_url, 0, page.size, query)}>; rel="first"'
    return link


def generate_pagination_headers(page: Page, base_url: str) -> dict:
    """X-Total-Count and Link headers for a listing endpoint."""
    return {
        "X-Total-Count": str(page.total),
        "Link": _build_link_header(page, base_url),
    }


def generate_search_pagination_headers(query: str, page: Page, base_url: str) -> dict:
    """Same as generate_pagination_headers, with the query echoed in every link."""
    return {
        "X-Total-Count": str(page.total),
        "Link": _build_link_header(page, base_url, query=query),
    }
