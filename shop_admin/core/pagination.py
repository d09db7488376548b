from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, TypeVar

from .exceptions import PaginationError

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 5


def total_pages(n_rows: int, page_size: int) -> int:
    """ceil(n_rows / page_size); 0 for an empty set."""
    if page_size < 1:
        raise PaginationError(f"page_size must be >= 1, got {page_size}")
    if n_rows <= 0:
        return 0
    return math.ceil(n_rows / page_size)


def paginate(filtered: Sequence[T], page: int, page_size: int, enabled: bool) -> Sequence[T]:
    """
    Slice the filtered set down to one page.

    With pagination disabled the filtered set is returned unchanged. A page
    past the end yields an empty slice rather than an error.
    """
    if not enabled:
        return filtered
    if page < 1:
        raise PaginationError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise PaginationError(f"page_size must be >= 1, got {page_size}")

    start = (page - 1) * page_size
    return filtered[start:start + page_size]


@dataclass
class PageState:
    """
    Current page pointer and page size.

    Transitions only happen through the methods below. Changing the search
    term elsewhere does not touch this object, so a narrowed filter can leave
    `page` past the last page until the user navigates.
    """
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise PaginationError(f"page must be >= 1, got {self.page}")
        if self.page_size < 1:
            raise PaginationError(f"page_size must be >= 1, got {self.page_size}")

    def previous_page(self) -> None:
        self.page = max(self.page - 1, 1)

    def next_page(self, n_pages: int) -> None:
        # no pages at all: leave the pointer where it is
        if n_pages == 0:
            return
        self.page = min(self.page + 1, n_pages)

    def set_page_size(self, page_size: int) -> None:
        """Always resets to page 1, even if the old page would still exist."""
        if page_size < 1:
            raise PaginationError(f"page_size must be >= 1, got {page_size}")
        self.page_size = page_size
        self.page = 1
