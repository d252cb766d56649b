# topmark:header:start
#
#   project      : REPLference
#   file         : test_columns.py
#   file_relpath : tests/rendering/test_columns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the column-major name layout."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from replference.rendering.columns import layout_columns, line_width, split_columns
from tests.strategies_replference import listing_names

NAMES: list[str] = ["a", "bb", "ccc", "d"]


def test_single_row_when_everything_fits() -> None:
    assert layout_columns(NAMES, 100) == ["a    bb    ccc    d"]


def test_fewest_rows_that_fit() -> None:
    assert layout_columns(NAMES, 10) == ["a     ccc", "bb    d"]


def test_width_zero_gives_one_name_per_line() -> None:
    assert layout_columns(NAMES, 0) == NAMES


def test_name_wider_than_width_still_printed() -> None:
    assert layout_columns(["a_very_long_name"], 4) == ["a_very_long_name"]


def test_empty_input() -> None:
    assert layout_columns([], 80) == []


def test_split_and_measure() -> None:
    columns = split_columns(NAMES, 3)
    assert columns == [["a", "bb", "ccc"], ["d"]]
    assert line_width(columns, gap=4) == 3 + 4 + 1


@given(listing_names(), st.integers(min_value=0, max_value=120))
def test_layout_is_column_major_and_lossless(names: list[str], width: int) -> None:
    """Reading columns top-to-bottom, left-to-right gives back the input."""
    lines = layout_columns(names, width)
    if not names:
        assert lines == []
        return
    rows: int = len(lines)
    assert split_columns(names, rows)[0] == [line.split()[0] for line in lines]
    assert sum(len(line.split()) for line in lines) == len(names)
    if len(split_columns(names, rows)) > 1:
        assert all(len(line) <= width for line in lines)
