"""
Tests for cursor pagination.
"""

from types import SimpleNamespace

from community.core.pagination import PageInfo
from community.core.pagination import paginate_by_cursor


def rows(*ids):
    return [SimpleNamespace(id=i) for i in ids]


class TestPaginateByCursor:
    def test_first_page_with_more_rows_than_limit(self):
        items = rows(*range(100, 75, -1))  # 25 rows

        page_items, page = paginate_by_cursor(items, last_id=0, limit=20)

        assert len(page_items) == 20
        assert page == PageInfo(has_prev=False, prev_id=0, has_next=True, next_id=81)

    def test_last_page_keeps_every_row(self):
        items = rows(5, 4, 3)

        page_items, page = paginate_by_cursor(items, last_id=0, limit=20)

        assert [p.id for p in page_items] == [5, 4, 3]
        assert page.has_next is False
        assert page.next_id == 3

    def test_exactly_limit_rows_has_no_next_page(self):
        items = rows(*range(20, 0, -1))

        _, page = paginate_by_cursor(items, last_id=0, limit=20)

        assert page.has_next is False
        assert page.next_id == 1

    def test_cursor_right_above_first_row_has_prev(self):
        items = rows(49, 48, 47)

        _, page = paginate_by_cursor(items, last_id=50, limit=20)

        assert page.has_prev is True
        assert page.prev_id == 70

    def test_small_gap_is_tolerated(self):
        # rows 45..49 went offline since the cursor was issued
        items = rows(45, 44)

        _, page = paginate_by_cursor(items, last_id=50, limit=20)

        assert page.has_prev is True
        assert page.prev_id == 70

    def test_large_gap_means_no_prev(self):
        items = rows(40, 39)

        _, page = paginate_by_cursor(items, last_id=50, limit=20)

        assert page.has_prev is False
        assert page.prev_id == 50

    def test_as_dict(self):
        page = PageInfo(has_prev=True, prev_id=40, has_next=True, next_id=1)

        assert page.as_dict() == {"has_prev": True, "prev_id": 40, "has_next": True, "next_id": 1}
