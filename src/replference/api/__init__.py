# topmark:header:start
#
#   project      : REPLference
#   file         : __init__.py
#   file_relpath : src/replference/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public REPLference API (stable surface).

Entry points meant to be called from an interactive interpreter:

```python
>>> from replference import explain, list_operations, print_type_tree
>>> explain("strings")          # by topic name or alias (case-insensitive prefix)
>>> explain(b"hello")           # by value: bytes resolve to the strings topic
>>> list_operations(42)         # integers listings
>>> list_operations(42, extended=True)
>>> print_type_tree(int)
```

Dispatch contract
-----------------
- A [`Topic`][replference.topics.base.Topic] member selects that topic.
- Any other `str` argument is a **topic name**: it is matched against the ordered
  pattern table. Unmatched names are a silent no-op (nothing printed, no
  error); the functions return ``None``.
- Any other value is dispatched on its **type** through the ordered category
  rules. Values outside every category raise
  [`UnsupportedTypeError`][replference.errors.UnsupportedTypeError].
- Use [`resolve_topic_by_type`][replference.topics.resolver.resolve_topic_by_type]
  directly to look up a string *value* (it resolves to the strings or
  characters topic).

All printing functions accept an optional console so output can be captured;
by default a stdout console with auto-detected color is used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from replference.cli_shared.console import default_console
from replference.config.logging import get_logger
from replference.listings.loader import get_listings
from replference.manuals import get_manual
from replference.rendering.listing import print_listing, terminal_width
from replference.rendering.manual import render_manual_text
from replference.rendering.tree import render_type_tree
from replference.topics.base import Topic
from replference.topics.info import topic_info
from replference.topics.resolver import resolve_topic_by_name, resolve_topic_by_type
from replference.typetree import build_type_tree

if TYPE_CHECKING:
    from replference.cli_shared.console_api import ConsoleLike
    from replference.config.logging import ReplferenceLogger
    from replference.listings.model import TopicListings
    from replference.typetree import TypeNode

logger: ReplferenceLogger = get_logger(__name__)


__all__: list[str] = [
    "explain",
    "list_operations",
    "print_type_tree",
    "resolve_topic",
    "topic_info",
]


def resolve_topic(subject: object) -> Topic | None:
    """Resolve the topic for a name or a value.

    A [`Topic`][replference.topics.base.Topic] member is returned as is.

    Args:
        subject (object): Topic, topic name (``str``) or any value.

    Returns:
        Topic | None: The topic, or ``None`` for an unmatched name.

    Raises:
        UnsupportedTypeError: If ``subject`` is a non-string value of an
            unsupported type.
    """
    if isinstance(subject, Topic):
        return subject
    if isinstance(subject, str):
        return resolve_topic_by_name(subject)
    return resolve_topic_by_type(subject)


def explain(
    subject: object,
    *,
    console: ConsoleLike | None = None,
    width: int | None = None,
    raw: bool = False,
) -> Topic | None:
    """Print the manual of the topic selected by ``subject``.

    Args:
        subject (object): Topic name or value (see module docs).
        console (ConsoleLike | None): Output console; defaults to stdout.
        width (int | None): Render width; defaults to the terminal width.
        raw (bool): Print the Markdown source instead of rendering it.

    Returns:
        Topic | None: The topic explained, or ``None`` if the name did not match.

    Raises:
        UnsupportedTypeError: If a value's type is unsupported.
        ContentError: If the bundled manual is missing or empty.
    """
    topic: Topic | None = resolve_topic(subject)
    if topic is None:
        return None

    console = console or default_console()
    manual: str = get_manual(topic)
    if raw:
        console.print(manual, nl=False)
    else:
        effective_width: int = terminal_width() if width is None else width
        console.print(
            render_manual_text(manual, color=console.enable_color, width=effective_width),
            nl=False,
        )
    logger.debug("Explained topic %s", topic.value)
    return topic


def list_operations(
    subject: object,
    *,
    extended: bool = False,
    console: ConsoleLike | None = None,
    width: int | None = None,
) -> Topic | None:
    """Print the categorized operation names of the topic selected by ``subject``.

    Args:
        subject (object): Topic name or value (see module docs).
        extended (bool): Also print the extended listings (e.g. ``Stdlib``).
        console (ConsoleLike | None): Output console; defaults to stdout.
        width (int | None): Line width for the name grid; defaults to the
            terminal width, 0 prints one name per line.

    Returns:
        Topic | None: The topic listed, or ``None`` if the name did not match.

    Raises:
        UnsupportedTypeError: If a value's type is unsupported.
        ContentError: If the bundled listing is missing or malformed.
    """
    topic: Topic | None = resolve_topic(subject)
    if topic is None:
        return None

    listings: TopicListings = get_listings(topic)
    print_listing(
        listings.select(extended=extended),
        console=console or default_console(),
        width=width,
    )
    logger.debug("Listed topic %s (extended=%s)", topic.value, extended)
    return topic


def print_type_tree(
    cls: type,
    *,
    depth: int | None = 1,
    console: ConsoleLike | None = None,
) -> TypeNode:
    """Print the subclass tree of ``cls``.

    Args:
        cls (type): Root class.
        depth (int | None): Levels of subclasses to show; ``None`` for all.
        console (ConsoleLike | None): Output console; defaults to stdout.

    Returns:
        TypeNode: The tree that was printed.

    Raises:
        UnsupportedTypeError: If ``cls`` is not a class.
    """
    tree: TypeNode = build_type_tree(cls, depth=depth)
    console = console or default_console()
    for line in render_type_tree(tree):
        console.print(line)
    return tree
