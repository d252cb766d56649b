# topmark:header:start
#
#   project      : REPLference
#   file         : info.py
#   file_relpath : src/replference/topics/info.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Descriptive metadata about topics.

Combines the static tables of the `topics` package into one read-only record
per topic, used by `replference topics` and by the public API.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Final

from replference.listings.loader import get_listings
from replference.topics.base import Topic
from replference.topics.categories import CATEGORY_TOPICS, TypeCategory
from replference.topics.patterns import TOPIC_PATTERNS

TOPIC_DESCRIPTIONS: Final[dict[Topic, str]] = {
    Topic.KEYWORDS: "Reserved words and soft keywords",
    Topic.VARIABLES: "Names, binding, scope and namespaces",
    Topic.OPERATORS: "Arithmetic, comparison, logical and bitwise operators",
    Topic.INTEGERS: "Arbitrary-precision integers and booleans",
    Topic.FLOATS: "IEEE 754 floating point and decimal numbers",
    Topic.COMPLEXES: "Complex numbers",
    Topic.RATIONALS: "Exact fractions",
    Topic.IRRATIONALS: "Irrational constants (π, ℯ, τ)",
    Topic.CHARACTERS: "Single characters and Unicode code points",
    Topic.STRINGS: "Immutable Unicode text",
    Topic.RANGES: "Immutable arithmetic progressions",
    Topic.ARRAYS: "Lists and other mutable sequences",
    Topic.TUPLES: "Immutable sequences and named tuples",
    Topic.DICTS: "Mappings from hashable keys to values",
    Topic.SETS: "Unordered collections of unique hashable elements",
    Topic.TYPES: "Classes, type objects and the type hierarchy",
    Topic.FUNCTIONS: "Functions, methods, lambdas and callables",
    Topic.FILES: "Files, streams and the io module",
    Topic.MODULES: "Modules, packages and the import system",
    Topic.REGEXES: "Regular expressions (re)",
    Topic.DATETIMES: "Dates, times and durations",
    Topic.RANDOMS: "Pseudo-random number generation",
    Topic.SYSTEMS: "Interpreter, process and OS interfaces (sys, os, subprocess)",
    Topic.ERRORS: "Exceptions and error handling",
    Topic.METAPROGRAMMING: "Code as data: ast, compile, eval and decorators",
}


@dataclass(frozen=True)
class TopicInfo:
    """Read-only summary of one topic.

    Attributes:
        topic (Topic): The topic.
        description (str): One-line description.
        pattern (str): Name pattern used by the name resolver.
        aliases (tuple[str, ...]): Literal spellings accepted by the pattern.
        categories (tuple[TypeCategory, ...]): Type categories bound to the topic.
        has_extended (bool): Whether the topic ships extended (stdlib) listings.
        position (int): 1-based position of the topic's pattern in the
            resolution order.
    """

    topic: Topic
    description: str
    pattern: str
    aliases: tuple[str, ...]
    categories: tuple[TypeCategory, ...]
    has_extended: bool
    position: int


@lru_cache(maxsize=None)
def topic_info(topic: Topic) -> TopicInfo:
    """Return the metadata record for ``topic``.

    Args:
        topic (Topic): The topic to describe.

    Returns:
        TopicInfo: The topic's metadata.

    Raises:
        ValueError: If ``topic`` has no name pattern.
    """
    for position, pattern in enumerate(TOPIC_PATTERNS, start=1):
        if pattern.topic is topic:
            break
    else:
        raise ValueError(f"Topic '{topic}' has no name pattern")

    return TopicInfo(
        topic=topic,
        description=TOPIC_DESCRIPTIONS[topic],
        pattern=pattern.pattern,
        aliases=pattern.aliases,
        categories=tuple(c for c, t in CATEGORY_TOPICS.items() if t is topic),
        has_extended=bool(get_listings(topic).extended),
        position=position,
    )


def all_topic_infos() -> list[TopicInfo]:
    """Return metadata for every topic, in resolution order."""
    return [topic_info(p.topic) for p in TOPIC_PATTERNS]
