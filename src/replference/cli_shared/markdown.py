# topmark:header:start
#
#   project      : REPLference
#   file         : markdown.py
#   file_relpath : src/replference/cli_shared/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown tables for ``replference topics --format markdown``."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Collection, Sequence


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    right_aligned: Collection[int] = (),
) -> str:
    """Render a GitHub-flavoured Markdown table with cells padded per column.

    Args:
        headers (Sequence[str]): Column titles.
        rows (Sequence[Sequence[str]]): Table body, one cell per header.
        right_aligned (Collection[int]): Indices of right-aligned columns.

    Returns:
        str: The table, ending with a newline.

    Raises:
        ValueError: If a row does not have one cell per header.
    """
    if any(len(row) != len(headers) for row in rows):
        raise ValueError("Every row needs exactly one cell per header")

    widths: list[int] = [max(len(cell) for cell in column) for column in zip(headers, *rows)]
    rule: list[str] = [
        "-" * (width - 1) + ":" if index in right_aligned else "-" * width
        for index, width in enumerate(widths)
    ]

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(cell.ljust(w) for cell, w in zip(cells, widths)) + " |"

    return "\n".join([_line(headers), _line(rule), *(_line(row) for row in rows)]) + "\n"
