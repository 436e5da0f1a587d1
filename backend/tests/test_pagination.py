import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from app.services.pagination import PageInfo, parse_positive_int


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, 8),
        ("3", 3),
        ("0", 8),
        ("-2", 8),
        ("two", 8),
        ("", 8),
        ("2147483647", 2147483647),
        ("2147483648", 8),
        ("99999999999999999999", 8),
    ],
)
def test_parse_positive_int_falls_back_to_default(raw, expected):
    assert parse_positive_int(raw, 8) == expected


def test_first_page_of_many():
    info = PageInfo.build(page=1, page_size=8, total=20)

    assert info.previous_page == 1
    assert info.next_page == 2
    assert info.first_page == 1
    assert info.last_page == 3
    assert info.total == 20


def test_next_page_stops_at_last_page():
    info = PageInfo.build(page=3, page_size=8, total=20)

    assert info.previous_page == 2
    assert info.next_page == 3


def test_empty_result_still_has_one_page():
    info = PageInfo.build(page=1, page_size=8, total=0)

    assert info.last_page == 1
    assert info.next_page == 1
