# topmark:header:start
#
#   project      : REPLference
#   file         : columns.py
#   file_relpath : src/replference/rendering/columns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Column-major layout of name lists.

Names are distributed down columns first (``names[0:rows]`` fill the first
column), using the fewest rows that keep every line within the available
width. Reading the columns top-to-bottom, left-to-right reproduces the input
order exactly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from replference.constants import COLUMN_GAP

if TYPE_CHECKING:
    from collections.abc import Sequence


def split_columns(names: Sequence[str], rows: int) -> list[list[str]]:
    """Split ``names`` into consecutive columns of ``rows`` entries (the last may be shorter).

    Args:
        names (Sequence[str]): Names in display order.
        rows (int): Number of rows per column (>= 1).

    Returns:
        list[list[str]]: The columns.
    """
    return [list(names[i : i + rows]) for i in range(0, len(names), rows)]


def line_width(columns: Sequence[Sequence[str]], *, gap: int = COLUMN_GAP) -> int:
    """Return the width of the widest line produced by ``columns``."""
    if not columns:
        return 0
    return sum(max(len(n) for n in col) for col in columns) + gap * (len(columns) - 1)


def layout_columns(names: Sequence[str], width: int, *, gap: int = COLUMN_GAP) -> list[str]:
    """Lay ``names`` out in column-major order within ``width`` characters.

    The number of rows grows from 1 until the lines fit. A single column
    (one name per line) is used when nothing narrower fits, including
    ``width <= 0``.

    Args:
        names (Sequence[str]): Names in display order.
        width (int): Maximum line width.
        gap (int): Spaces between columns.

    Returns:
        list[str]: Output lines, without trailing whitespace.
    """
    if not names:
        return []

    columns: list[list[str]] = [list(names)]
    for rows in range(1, len(names) + 1):
        columns = split_columns(names, rows)
        if len(columns) == 1 or line_width(columns, gap=gap) <= width:
            break

    widths: list[int] = [max(len(n) for n in col) for col in columns]
    lines: list[str] = []
    for r in range(len(columns[0])):
        cells: list[str] = [
            col[r].ljust(widths[c]) for c, col in enumerate(columns) if r < len(col)
        ]
        lines.append((" " * gap).join(cells).rstrip())
    return lines
