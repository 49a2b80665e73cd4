from __future__ import annotations

from typing import List, Union


ELLIPSIS = "..."

# Up to this many pages every number is shown
_SHOW_ALL_LIMIT = 5

PageMarker = Union[int, str]


def page_window(current_page: int, total_pages: int) -> List[PageMarker]:
    """Page numbers for the pager control, with ELLIPSIS standing in for gaps.

    >>> page_window(5, 10)
    [1, '...', 4, 5, 6, '...', 10]
    """
    if total_pages <= 0:
        return []
    if total_pages <= _SHOW_ALL_LIMIT:
        return list(range(1, total_pages + 1))

    current = min(max(current_page, 1), total_pages)
    if current <= 3:
        return [1, 2, 3, 4, ELLIPSIS, total_pages]
    if current >= total_pages - 2:
        return [1, ELLIPSIS] + list(range(total_pages - 3, total_pages + 1))
    return [1, ELLIPSIS, current - 1, current, current + 1, ELLIPSIS, total_pages]
