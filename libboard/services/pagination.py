"""Page-group windowing for 1-based pagers."""

import math

from libboard.core.exceptions import InvalidPageNumberException, InvalidPageSizeException
from libboard.schemas.pagination import PageWindow

# Number of page buttons shown together
PAGE_GROUP_SIZE = 10


def page_offset(page: int, size: int) -> int:
    """0-based item offset of a 1-based page."""
    return (page - 1) * size


def compute_page_window(
    page: int,
    size: int,
    total: int,
    group_size: int = PAGE_GROUP_SIZE,
) -> PageWindow:
    """
    Compute the pager window for ``page`` of ``size`` items out of ``total``.

    Pages past the end still produce a well-defined window; the item slice
    for them is simply empty.

    Args:
        page: Requested page, 1-based
        size: Items per page
        total: Total number of items
        group_size: Page buttons per group

    Returns:
        PageWindow

    Raises:
        InvalidPageSizeException: size <= 0
        InvalidPageNumberException: page < 1
    """
    if size <= 0:
        raise InvalidPageSizeException()
    if page < 1:
        raise InvalidPageNumberException()

    total = max(total, 0)
    total_pages = math.ceil(total / size) if total else 0

    current_group = (page - 1) // group_size
    start_page = current_group * group_size + 1
    end_page = min(total_pages, start_page + group_size - 1)

    return PageWindow(
        current_page=page,
        page_size=size,
        total_items=total,
        total_pages=total_pages,
        group_size=group_size,
        current_group=current_group,
        start_page=start_page,
        end_page=end_page,
        has_prev_group=start_page > 1,
        prev_group_page=start_page - 1,
        has_next_group=end_page < total_pages,
        next_group_page=end_page + 1,
        offset=page_offset(page, size),
        page_numbers=list(range(start_page, end_page + 1)),
    )
