# topmark:header:start
#
#   project      : REPLference
#   file         : test_listing_render.py
#   file_relpath : tests/rendering/test_listing_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for text, Markdown and payload rendering of listings."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from replference.cli_shared.console import ClickConsole
from replference.listings.model import Listing, ListingSection, TopicListings
from replference.rendering.listing import (
    listings_payload,
    print_listing,
    render_listing_text,
    render_listings_markdown,
)
from replference.topics import Topic

if TYPE_CHECKING:
    from tests.conftest import Captured

FLAT = Listing(title="Types", names=("dict", "OrderedDict"))
SECTIONED = Listing(
    title="Methods",
    sections=(
        ListingSection("In-Place", ("pop", "clear")),
        ListingSection("Loop", ("items",)),
    ),
)
STDLIB = Listing(title="Stdlib", names=("copy.deepcopy",), extended=True)


def test_flat_group_text(captured: Captured) -> None:
    lines = render_listing_text(FLAT, console=captured.console, width=0)
    assert lines == ["Types", "≡" * 7, "dict", "OrderedDict", ""]


def test_sectioned_group_text(captured: Captured) -> None:
    lines = render_listing_text(SECTIONED, console=captured.console, width=80)
    assert lines == [
        "Methods",
        "≡" * 9,
        "",
        "In-Place",
        "pop    clear",
        "",
        "Loop",
        "items",
        "",
    ]


def test_print_listing_keeps_group_order(captured: Captured) -> None:
    print_listing([SECTIONED, FLAT], console=captured.console, width=0)
    lines = captured.lines
    assert lines.index("Methods") < lines.index("Types")
    assert captured.text.endswith("OrderedDict\n\n")


def test_color_console_styles_titles() -> None:
    buffer = StringIO()
    console = ClickConsole(enable_color=True, out=buffer, err=buffer)
    lines = render_listing_text(FLAT, console=console, width=0)
    assert lines[0] != "Types"
    assert "\x1b[" in lines[0]
    assert "Types" in lines[0]
    assert lines[2] == "dict"


def test_markdown_rendering() -> None:
    text = render_listings_markdown([FLAT, SECTIONED], heading="Dicts")
    assert text == (
        "# Dicts\n"
        "\n"
        "## Types\n"
        "\n"
        "- `dict`\n"
        "- `OrderedDict`\n"
        "\n"
        "## Methods\n"
        "\n"
        "### In-Place\n"
        "\n"
        "- `pop`\n"
        "- `clear`\n"
        "\n"
        "### Loop\n"
        "\n"
        "- `items`\n"
    )


def test_payload_respects_extended_flag() -> None:
    listings = TopicListings(topic=Topic.DICTS, core=(FLAT,), extended=(STDLIB,))

    core = listings_payload(listings, extended=False)
    assert core["topic"] == "dicts"
    assert [entry["title"] for entry in core["listings"]] == ["Types"]

    full = listings_payload(listings, extended=True)
    assert full["extended"] is True
    assert [entry["title"] for entry in full["listings"]] == ["Types", "Stdlib"]
