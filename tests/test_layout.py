from __future__ import annotations

from statement_parser.layout import document_text, group_rows, page_lines, reconstruct_lines
from statement_parser.models import TextItem


def _items(*rows):
    return [TextItem(text=t, x=x, y=y) for t, x, y in rows]


def test_rows_sorted_top_to_bottom_and_left_to_right():
    items = _items(
        ("1,213.49", 450, 600.2),
        ("05/30", 40, 599.8),
        ("Payroll", 90, 600.0),
        ("TRANSACTION DETAIL", 40, 700),
    )
    assert page_lines(items) == ["TRANSACTION DETAIL", "05/30 Payroll 1,213.49"]


def test_half_up_rounding_merges_sub_pixel_jitter():
    items = _items(("a", 10, 100.5), ("b", 20, 101.2))
    assert page_lines(items) == ["a b"]


def test_adjacent_rounded_rows_are_not_merged_without_tolerance():
    items = _items(("left", 10, 101), ("right", 200, 100))
    assert page_lines(items) == ["left", "right"]


def test_tolerance_band_merges_adjacent_rows():
    items = _items(("left", 10, 101), ("right", 200, 100), ("next", 10, 90))
    assert page_lines(items, tolerance=1.0) == ["left right", "next"]
    assert len(group_rows(items, tolerance=1.0)) == 2


def test_pages_are_concatenated_in_document_order():
    page1 = _items(("first", 10, 700), ("second", 10, 650))
    page2 = _items(("third", 10, 700))
    assert reconstruct_lines([page1, page2]) == ["first", "second", "third"]
    assert document_text([page1, page2]) == "first\nsecond\nthird\n"


def test_empty_document():
    assert document_text([]) == ""
    assert page_lines([]) == []
