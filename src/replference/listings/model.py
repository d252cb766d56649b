# topmark:header:start
#
#   project      : REPLference
#   file         : model.py
#   file_relpath : src/replference/listings/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Listing data model.

A topic's listings are ordered, named groups of identifiers (functions,
decorators, types, operators). A group is either *flat* (one sequence of
names) or *sectioned* (a sequence of titled sub-groups, e.g. ``Methods``
split into ``In-Place``, ``Indices``, ...).

All containers are tuples: listings are static data and are never mutated
after loading. Authoring order is significant and preserved everywhere.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

    from replference.topics.base import Topic


@dataclass(frozen=True)
class ListingSection:
    """A titled, ordered sequence of names inside a sectioned listing.

    Attributes:
        title (str): Section title (e.g. ``"In-Place"``).
        names (tuple[str, ...]): Identifiers in authoring order.
    """

    title: str
    names: tuple[str, ...]


@dataclass(frozen=True)
class Listing:
    """A top-level listing group.

    Attributes:
        title (str): Group title (e.g. ``"Methods"``).
        names (tuple[str, ...]): Identifiers of a flat group.
        sections (tuple[ListingSection, ...]): Sub-groups of a sectioned group.
        extended (bool): True for groups that document optional/non-core
            (standard library) names.
    """

    title: str
    names: tuple[str, ...] = ()
    sections: tuple[ListingSection, ...] = ()
    extended: bool = False

    @property
    def is_sectioned(self) -> bool:
        """Whether the group is split into titled sections."""
        return bool(self.sections)

    def iter_names(self) -> Iterator[str]:
        """Yield every name of the group, section by section."""
        yield from self.names
        for section in self.sections:
            yield from section.names

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation (order preserved)."""
        if self.is_sectioned:
            return {
                "title": self.title,
                "extended": self.extended,
                "sections": [{"title": s.title, "names": list(s.names)} for s in self.sections],
            }
        return {"title": self.title, "extended": self.extended, "names": list(self.names)}


@dataclass(frozen=True)
class TopicListings:
    """All listing groups of one topic, split into core and extended groups.

    Attributes:
        topic (Topic): The topic the listings document.
        core (tuple[Listing, ...]): Groups always shown.
        extended (tuple[Listing, ...]): Groups shown only on request.
    """

    topic: Topic
    core: tuple[Listing, ...]
    extended: tuple[Listing, ...] = ()

    def select(self, *, extended: bool = False) -> tuple[Listing, ...]:
        """Return the groups to print: core groups, then extended ones if requested.

        Args:
            extended (bool): Include the extended groups after the core ones.

        Returns:
            tuple[Listing, ...]: Groups in authoring order.
        """
        if extended:
            return self.core + self.extended
        return self.core

    def titles(self, *, extended: bool = False) -> list[str]:
        """Return the titles of the selected groups, in order."""
        return [listing.title for listing in self.select(extended=extended)]
