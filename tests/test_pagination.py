"""Tests for the page-group window."""

import pytest

from libboard.core.exceptions import InvalidPageNumberException, InvalidPageSizeException
from libboard.services.pagination import compute_page_window, page_offset


class TestComputePageWindow:

    def test_first_page_of_ten(self):
        window = compute_page_window(1, 10, 95)

        assert window.total_pages == 10
        assert window.current_group == 0
        assert window.start_page == 1
        assert window.end_page == 10
        assert window.has_prev_group is False
        assert window.has_next_group is False
        assert window.offset == 0
        assert window.page_numbers == list(range(1, 11))

    def test_second_group(self):
        window = compute_page_window(11, 10, 250)

        assert window.total_pages == 25
        assert window.current_group == 1
        assert window.start_page == 11
        assert window.end_page == 20
        assert window.has_prev_group is True
        assert window.prev_group_page == 10
        assert window.has_next_group is True
        assert window.next_group_page == 21
        assert window.offset == 100

    def test_last_partial_group(self):
        window = compute_page_window(23, 10, 250)

        assert window.start_page == 21
        assert window.end_page == 25
        assert window.has_next_group is False
        assert window.page_numbers == [21, 22, 23, 24, 25]

    def test_no_items(self):
        window = compute_page_window(1, 10, 0)

        assert window.total_pages == 0
        assert window.start_page == 1
        assert window.end_page == 0
        assert window.has_prev_group is False
        assert window.has_next_group is False
        assert window.page_numbers == []

    def test_page_beyond_the_end_is_well_defined(self):
        window = compute_page_window(15, 10, 95)

        assert window.total_pages == 10
        assert window.start_page == 11
        assert window.end_page == 10
        assert window.has_prev_group is True
        assert window.has_next_group is False
        assert window.page_numbers == []
        assert window.offset == 140

    def test_partial_last_page_counts(self):
        assert compute_page_window(1, 10, 91).total_pages == 10
        assert compute_page_window(1, 10, 101).total_pages == 11

    def test_custom_group_size(self):
        window = compute_page_window(6, 10, 200, group_size=5)

        assert window.start_page == 6
        assert window.end_page == 10
        assert window.prev_group_page == 5

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size_rejected(self, size):
        with pytest.raises(InvalidPageSizeException):
            compute_page_window(1, size, 10)

    def test_page_zero_rejected(self):
        with pytest.raises(InvalidPageNumberException):
            compute_page_window(0, 10, 10)

    def test_size_checked_before_page(self):
        with pytest.raises(InvalidPageSizeException):
            compute_page_window(0, 0, 10)


def test_page_offset():
    assert page_offset(1, 10) == 0
    assert page_offset(3, 20) == 40
