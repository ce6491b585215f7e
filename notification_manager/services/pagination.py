"""Page window arithmetic shared by every list endpoint."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PageWindow:
    """Which slice of a result set to return."""
    current_page: int
    last_page: int
    skip: int
    limit: int | None  # None means "no limit"


def page_window(total: int, page_number: int, page_size: int) -> PageWindow:
    """
    Compute the page to return for ``total`` matching rows.

    A ``page_number`` of 0 or less (or an empty result set) returns every row
    and reports page 1 of 1. Otherwise ``page_size`` is clamped to at least 1
    and ``page_number`` to ``[1, last_page]``.
    """
    if page_number <= 0 or total <= 0:
        return PageWindow(current_page=1, last_page=1, skip=0, limit=None)

    size = max(page_size, 1)
    last_page = math.ceil(total / size)
    current = min(max(page_number, 1), last_page)

    return PageWindow(
        current_page=current,
        last_page=last_page,
        skip=(current - 1) * size,
        limit=size,
    )
