"""
In-memory pagination for lists already fetched from the record store.

Unlike django.core.paginator, this never clamps: callers decide what to do with
out-of-range page numbers (see clamp_page) and an empty list has zero pages.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Page:
    """One page slice of a list"""

    items: list[Any]
    number: int
    page_size: int
    total_items: int
    total_pages: int
    page_range: list[int] = field(default_factory=list)

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    @property
    def previous_page_number(self) -> int:
        return self.number - 1

    @property
    def next_page_number(self) -> int:
        return self.number + 1

    @property
    def start_index(self) -> int:
        """1-based index of the first item on this page, 0 when empty"""
        if not self.items:
            return 0
        return (self.number - 1) * self.page_size + 1

    @property
    def end_index(self) -> int:
        if not self.items:
            return 0
        return self.start_index + len(self.items) - 1


def total_pages_for(count: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return math.ceil(count / page_size)


def paginate(items: Sequence[Any], page: int, page_size: int) -> Page:
    """
    Slice ``items`` into page ``page`` (1-based).

    total_pages == ceil(len(items) / page_size). Pages past the end return an
    empty slice; page numbers below 1 are rejected.
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    total_pages = total_pages_for(len(items), page_size)

    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        number=page,
        page_size=page_size,
        total_items=len(items),
        total_pages=total_pages,
        page_range=list(range(1, total_pages + 1)),
    )


def clamp_page(page: Any, total_pages: int) -> int:
    """Coerce a user-supplied page number into [1, max(total_pages, 1)]"""
    try:
        number = int(page)
    except (TypeError, ValueError):
        number = 1
    return max(1, min(number, max(total_pages, 1)))


@dataclass
class Listing:
    """Filtered list plus the page currently shown (the list view model)"""

    filtered: list[Any]
    page: Page

    @property
    def is_empty(self) -> bool:
        return not self.filtered


def build_listing(filtered: Sequence[Any], requested_page: Any, page_size: int) -> Listing:
    """
    View-side helper: clamp the page requested in the query string, then paginate.
    """
    page = clamp_page(requested_page, total_pages_for(len(filtered), page_size))
    return Listing(filtered=list(filtered), page=paginate(filtered, page, page_size))
