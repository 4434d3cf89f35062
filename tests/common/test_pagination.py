"""
Tests for in-memory pagination of record store lists.
"""

import math

import pytest

from apps.common.pagination import build_listing, clamp_page, paginate, total_pages_for


class TestPaginate:
    @pytest.mark.parametrize('count,page_size', [(0, 5), (1, 5), (5, 5), (6, 5), (12, 5), (23, 10)])
    def test_pages_reassemble_the_list(self, count: int, page_size: int) -> None:
        items = list(range(count))
        total_pages = total_pages_for(count, page_size)
        assert total_pages == math.ceil(count / page_size)

        reassembled = []
        for number in range(1, total_pages + 1):
            reassembled.extend(paginate(items, number, page_size).items)
        assert reassembled == items

    def test_empty_list_has_zero_pages(self) -> None:
        page = paginate([], 1, 5)
        assert page.items == []
        assert page.total_pages == 0
        assert page.page_range == []
        assert not page.has_next
        assert not page.has_previous
        assert page.start_index == page.end_index == 0

    def test_page_past_the_end_is_empty(self) -> None:
        page = paginate(list(range(12)), 4, 5)
        assert page.items == []
        assert page.total_pages == 3

    def test_navigation_flags(self) -> None:
        items = list(range(12))
        first, middle, last = (paginate(items, n, 5) for n in (1, 2, 3))

        assert not first.has_previous and first.has_next
        assert middle.has_previous and middle.has_next
        assert last.has_previous and not last.has_next
        assert middle.previous_page_number == 1
        assert middle.next_page_number == 3
        assert (last.start_index, last.end_index) == (11, 12)

    def test_page_below_one_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            paginate([1, 2, 3], 0, 5)

    def test_page_size_below_one_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            paginate([1, 2, 3], 1, 0)


class TestClampPage:
    @pytest.mark.parametrize('requested,total_pages,expected', [
        ('2', 3, 2),
        (9, 3, 3),
        (0, 3, 1),
        (-4, 3, 1),
        ('abc', 3, 1),
        (None, 3, 1),
        (5, 0, 1),
    ])
    def test_clamp(self, requested, total_pages: int, expected: int) -> None:
        assert clamp_page(requested, total_pages) == expected


class TestBuildListing:
    def test_out_of_range_request_shows_last_page(self) -> None:
        listing = build_listing(list(range(7)), '10', 5)
        assert listing.page.number == 2
        assert listing.page.items == [5, 6]
        assert not listing.is_empty

    def test_empty_listing(self) -> None:
        listing = build_listing([], '1', 5)
        assert listing.is_empty
        assert listing.page.number == 1
        assert listing.page.items == []
