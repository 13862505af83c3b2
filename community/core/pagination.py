"""
Cursor based pagination over records ordered by descending id.

The caller fetches ``limit + PREFETCH_EXTRA`` rows below the cursor; having
more than ``limit`` rows back tells us a next page exists without a count
query.
"""

from dataclasses import asdict
from dataclasses import dataclass

PREFETCH_EXTRA = 5
# Rows may have been taken offline since the cursor was issued, so the first
# id of the page can lag the cursor by a few positions.
PREV_DRIFT = 5


@dataclass
class PageInfo:
    has_prev: bool = False
    prev_id: int = 0
    has_next: bool = False
    next_id: int = 0

    def as_dict(self) -> dict:
        return asdict(self)


def paginate_by_cursor(items: list, last_id: int, limit: int) -> tuple[list, PageInfo]:
    """
    Trim ``items`` to one page and compute the navigation cursors.

    ``items`` must be non empty and sorted by id descending.
    """
    page = PageInfo()

    if last_id > 0:
        page.prev_id = last_id
        if page.prev_id - items[0].id > PREV_DRIFT:
            page.has_prev = False
        else:
            page.prev_id += limit
            page.has_prev = True

    if len(items) > limit:
        page.has_next = True
        items = items[:limit]
        page.next_id = items[limit - 1].id
    else:
        page.next_id = items[-1].id

    return items, page
