"""Client-side pagination of a filtered dataset."""

import math
from typing import Sequence, Tuple, TypeVar

T = TypeVar("T")


def total_pages(filtered_count: int, page_size: int) -> int:
    """Number of pages needed for a result set, never less than 1."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return max(1, math.ceil(filtered_count / page_size))


def clamp_page(requested_page: int, total: int) -> int:
    """Pull a requested page number into [1, total]."""
    return max(1, min(requested_page, total))


def visible_page(filtered: Sequence[T], page_size: int, current_page: int) -> Tuple[T, ...]:
    """
    Slice one page out of a filtered dataset.

    Args:
        filtered: Records to paginate
        page_size: Records per page
        current_page: 1-based page number; out-of-range values are clamped

    Returns:
        The records on that page (empty only when ``filtered`` is empty)
    """
    count = len(filtered)
    page = clamp_page(current_page, total_pages(count, page_size))
    start = (page - 1) * page_size
    end = min(page * page_size, count)
    return tuple(filtered[start:end])


def page_numbers(total: int) -> range:
    """Page numbers to offer as direct navigation links."""
    return range(1, total + 1)


class Paginator:
    """
    Tracks the current page of a result set.

    The current page stays within [1, total_pages] after every transition.
    """

    def __init__(self, page_size: int, filtered_count: int = 0):
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        self.page_size = page_size
        self._count = filtered_count
        self.current_page = 1

    @property
    def total_pages(self) -> int:
        return total_pages(self._count, self.page_size)

    @property
    def filtered_count(self) -> int:
        return self._count

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def sync(self, filtered_count: int) -> int:
        """Record a new result-set size and re-clamp the current page."""
        self._count = filtered_count
        self.current_page = clamp_page(self.current_page, self.total_pages)
        return self.current_page

    def reset(self) -> int:
        """Return to the first page."""
        self.current_page = 1
        return self.current_page

    def go_to(self, page: int) -> int:
        self.current_page = clamp_page(page, self.total_pages)
        return self.current_page

    def previous(self) -> int:
        return self.go_to(self.current_page - 1)

    def next(self) -> int:
        return self.go_to(self.current_page + 1)

    def page_of(self, filtered: Sequence[T]) -> Tuple[T, ...]:
        """Visible slice of ``filtered`` for the current page."""
        return visible_page(filtered, self.page_size, self.current_page)
