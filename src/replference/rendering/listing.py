# topmark:header:start
#
#   project      : REPLference
#   file         : listing.py
#   file_relpath : src/replference/rendering/listing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Renderers for topic listings.

Three shapes are produced from the same [`Listing`][replference.listings.model.Listing]
groups, always in authoring order (never sorted):

- TEXT: a bold yellow title over a ``≡`` rule two characters wider than the
  title, followed by the names in column-major layout; sections of a
  sectioned group are introduced by a blank line and an underlined, bold,
  reversed title.
- MARKDOWN: ``## Title`` / ``### Section`` headings and bullet lists.
- Machine payloads: plain dicts for JSON/NDJSON serialization.
"""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING, Any

from replference.constants import LISTING_RULE_CHAR
from replference.rendering.columns import layout_columns

if TYPE_CHECKING:
    from collections.abc import Sequence

    from replference.cli_shared.console_api import ConsoleLike
    from replference.listings.model import Listing, TopicListings


def terminal_width() -> int:
    """Return the current terminal width (80 columns when unknown)."""
    return shutil.get_terminal_size(fallback=(80, 24)).columns


def render_listing_text(
    listing: Listing,
    *,
    console: ConsoleLike,
    width: int,
) -> list[str]:
    """Render one listing group as styled text lines.

    Args:
        listing (Listing): The group to render.
        console (ConsoleLike): Console used for styling (plain when color is off).
        width (int): Maximum line width for the name grid.

    Returns:
        list[str]: Output lines; the last one is blank.
    """
    lines: list[str] = [
        console.styled(listing.title, bold=True, fg="yellow"),
        console.styled(LISTING_RULE_CHAR * (len(listing.title) + 2), bold=True, fg="yellow"),
    ]
    lines.extend(layout_columns(listing.names, width))
    for section in listing.sections:
        lines.append("")
        lines.append(console.styled(section.title, bold=True, underline=True, reverse=True))
        lines.extend(layout_columns(section.names, width))
    lines.append("")
    return lines


def print_listing(
    listings: Sequence[Listing],
    *,
    console: ConsoleLike,
    width: int | None = None,
) -> None:
    """Print listing groups, one after the other, in the given order.

    Args:
        listings (Sequence[Listing]): Groups to print.
        console (ConsoleLike): Output console.
        width (int | None): Maximum line width; defaults to the terminal width.
    """
    effective_width: int = terminal_width() if width is None else width
    for listing in listings:
        for line in render_listing_text(listing, console=console, width=effective_width):
            console.print(line)


def render_listings_markdown(listings: Sequence[Listing], *, heading: str | None = None) -> str:
    """Render listing groups as Markdown.

    Args:
        listings (Sequence[Listing]): Groups to render.
        heading (str | None): Optional level-1 heading.

    Returns:
        str: The Markdown document, ending with a newline.
    """
    out: list[str] = []
    if heading:
        out.append(f"# {heading}")
        out.append("")
    for listing in listings:
        out.append(f"## {listing.title}")
        out.append("")
        out.extend(f"- `{name}`" for name in listing.names)
        for section in listing.sections:
            if out[-1] != "":
                out.append("")
            out.append(f"### {section.title}")
            out.append("")
            out.extend(f"- `{name}`" for name in section.names)
        out.append("")
    return "\n".join(out).rstrip() + "\n"


def listings_payload(topic_listings: TopicListings, *, extended: bool) -> dict[str, Any]:
    """Return a JSON-friendly payload for a topic's selected listings."""
    return {
        "topic": topic_listings.topic.value,
        "extended": extended,
        "listings": [listing.to_dict() for listing in topic_listings.select(extended=extended)],
    }
