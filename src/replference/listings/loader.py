# topmark:header:start
#
#   project      : REPLference
#   file         : loader.py
#   file_relpath : src/replference/listings/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load listing data from the bundled TOML resources.

Each topic has one resource ``replference/content/listings/<topic>.toml``.
Every top-level table is one listing group, in document order:

```toml
[Constants]
names = ["None", "Ellipsis"]

[Methods."In-Place"]
names = ["clear", "pop"]

[Stdlib]
extended = true
names = ["copy.deepcopy"]
```

A table with a ``names`` array is a flat group; a table whose values are
tables is a sectioned group (each sub-table carrying its own ``names``).
``extended = true`` moves a group to the extended set.

Parsing is done with `tomlkit`, which preserves document order. Results are
cached: content is loaded once per process and never mutated.
"""

from __future__ import annotations

from functools import lru_cache
from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from replference.config.logging import ReplferenceLogger, get_logger
from replference.constants import LISTING_SUFFIX, LISTINGS_PACKAGE
from replference.errors import ContentError
from replference.listings.model import Listing, ListingSection, TopicListings

if TYPE_CHECKING:
    from replference.topics.base import Topic

logger: ReplferenceLogger = get_logger(__name__)

TomlTable = dict[str, Any]

KEY_NAMES: str = "names"
KEY_EXTENDED: str = "extended"


def _as_names(resource: str, where: str, value: Any) -> tuple[str, ...]:
    """Validate a ``names`` array and return it as a tuple."""
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ContentError(resource, f"'{where}.{KEY_NAMES}' must be an array of strings")
    return tuple(cast("list[str]", value))


def parse_listing_table(resource: str, title: str, table: TomlTable) -> Listing:
    """Build a [`Listing`][replference.listings.model.Listing] from one top-level table.

    Args:
        resource (str): Resource name, used in error messages.
        title (str): The table key, used as the group title.
        table (TomlTable): The table contents.

    Returns:
        Listing: The parsed group.

    Raises:
        ContentError: If the table is neither a flat nor a sectioned group.
    """
    extended: Any = table.get(KEY_EXTENDED, False)
    if not isinstance(extended, bool):
        raise ContentError(resource, f"'{title}.{KEY_EXTENDED}' must be a boolean")

    if KEY_NAMES in table:
        return Listing(
            title=title,
            names=_as_names(resource, title, table[KEY_NAMES]),
            extended=extended,
        )

    sections: list[ListingSection] = []
    for key, value in table.items():
        if key == KEY_EXTENDED:
            continue
        if not isinstance(value, dict) or KEY_NAMES not in value:
            raise ContentError(
                resource, f"'{title}.{key}' must be a table with a '{KEY_NAMES}' array"
            )
        section_table: TomlTable = cast("TomlTable", value)
        sections.append(
            ListingSection(
                title=key,
                names=_as_names(resource, f"{title}.{key}", section_table[KEY_NAMES]),
            )
        )
    if not sections:
        raise ContentError(resource, f"'{title}' has neither '{KEY_NAMES}' nor sections")
    return Listing(title=title, sections=tuple(sections), extended=extended)


def parse_listings(topic: Topic, text: str, *, resource: str = "<string>") -> TopicListings:
    """Parse TOML listing text for ``topic``.

    Args:
        topic (Topic): The topic the listings belong to.
        text (str): TOML document text.
        resource (str): Resource name, used in error messages.

    Returns:
        TopicListings: Core and extended groups, in document order.

    Raises:
        ContentError: If the document is not valid TOML or not a valid listing.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ContentError(resource, f"invalid TOML: {exc}") from exc

    data: Any = doc.unwrap()
    core: list[Listing] = []
    extended: list[Listing] = []
    for title, table in cast("TomlTable", data).items():
        if not isinstance(table, dict):
            raise ContentError(resource, f"top-level key '{title}' must be a table")
        listing: Listing = parse_listing_table(resource, title, cast("TomlTable", table))
        (extended if listing.extended else core).append(listing)

    return TopicListings(topic=topic, core=tuple(core), extended=tuple(extended))


@lru_cache(maxsize=None)
def get_listings(topic: Topic) -> TopicListings:
    """Return (and cache) the listings of ``topic``.

    Args:
        topic (Topic): The topic to load.

    Returns:
        TopicListings: The topic's listings.

    Raises:
        ContentError: If the bundled resource is missing or malformed.
    """
    resource: str = f"{topic.value}{LISTING_SUFFIX}"
    try:
        text: str = files(LISTINGS_PACKAGE).joinpath(resource).read_text(encoding="utf-8")
    except OSError as exc:
        raise ContentError(resource, f"cannot read bundled listing: {exc}") from exc

    listings: TopicListings = parse_listings(topic, text, resource=resource)
    logger.debug(
        "Loaded %d core and %d extended listing groups for %s",
        len(listings.core),
        len(listings.extended),
        topic,
    )
    return listings
