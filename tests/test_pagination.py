from __future__ import annotations

from services.pagination import ELLIPSIS, page_window


def test_window_middle():
    assert page_window(5, 10) == [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10]


def test_window_shows_all_when_few_pages():
    assert page_window(1, 1) == [1]
    assert page_window(3, 5) == [1, 2, 3, 4, 5]


def test_window_near_start_and_end():
    assert page_window(1, 10) == [1, 2, 3, 4, ELLIPSIS, 10]
    assert page_window(3, 10) == [1, 2, 3, 4, ELLIPSIS, 10]
    assert page_window(8, 10) == [1, ELLIPSIS, 7, 8, 9, 10]
    assert page_window(10, 10) == [1, ELLIPSIS, 7, 8, 9, 10]


def test_window_without_pages_and_out_of_range_current():
    assert page_window(1, 0) == []
    assert page_window(42, 10) == [1, ELLIPSIS, 7, 8, 9, 10]
    assert page_window(-3, 6) == [1, 2, 3, 4, ELLIPSIS, 6]
