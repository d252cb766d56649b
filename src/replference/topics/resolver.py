# topmark:header:start
#
#   project      : REPLference
#   file         : resolver.py
#   file_relpath : src/replference/topics/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Topic resolution by name and by value.

Two lookups share the same set of topics but follow different failure
policies:

- [`resolve_topic_by_name`][replference.topics.resolver.resolve_topic_by_name]
  is permissive: an unrecognized name yields ``None`` and callers do nothing.
- [`resolve_topic_by_type`][replference.topics.resolver.resolve_topic_by_type]
  is total over the registered categories and raises
  [`UnsupportedTypeError`][replference.errors.UnsupportedTypeError] otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from replference.config.logging import ReplferenceLogger, get_logger
from replference.errors import UnsupportedTypeError
from replference.topics.categories import CATEGORY_RULES, CATEGORY_TOPICS
from replference.topics.patterns import TOPIC_PATTERNS

if TYPE_CHECKING:
    from collections.abc import Sequence

    from replference.topics.base import Topic, TopicPattern
    from replference.topics.categories import CategoryRule, TypeCategory

logger: ReplferenceLogger = get_logger(__name__)


def resolve_topic_by_name(
    name: str,
    patterns: Sequence[TopicPattern] = TOPIC_PATTERNS,
) -> Topic | None:
    """Resolve a free-text topic name to a topic.

    Patterns are tried in order and the first one matching a prefix of
    ``name`` (case-insensitively) wins.

    Args:
        name (str): Any string, e.g. ``"Integer"``, ``"namedtuple"``, ``""``.
        patterns (Sequence[TopicPattern]): Resolution table; defaults to
            [`TOPIC_PATTERNS`][replference.topics.patterns.TOPIC_PATTERNS].

    Returns:
        Topic | None: The matched topic, or ``None`` when no pattern matches.
    """
    for pattern in patterns:
        if pattern.matches(name):
            logger.trace("Name %r matched pattern %r -> %s", name, pattern.pattern, pattern.topic)
            return pattern.topic
    logger.debug("No topic matches name %r", name)
    return None


def resolve_type_category(
    obj: object,
    rules: Sequence[CategoryRule] = CATEGORY_RULES,
) -> TypeCategory:
    """Return the most specific registered category of ``obj``.

    Args:
        obj (object): Any Python value (classes are values of category ``type``).
        rules (Sequence[CategoryRule]): Classification rules, most specific
            first; defaults to
            [`CATEGORY_RULES`][replference.topics.categories.CATEGORY_RULES].

    Returns:
        TypeCategory: The category of the first rule accepting ``obj``.

    Raises:
        UnsupportedTypeError: If no rule accepts ``obj``.
    """
    for rule in rules:
        if rule.accepts(obj):
            return rule.category
    raise UnsupportedTypeError(obj)


def resolve_topic_by_type(obj: object) -> Topic:
    """Resolve a Python value to the topic documenting its category.

    Args:
        obj (object): Any Python value.

    Returns:
        Topic: The topic bound to the value's most specific category.

    Raises:
        UnsupportedTypeError: If the value belongs to no registered category.
    """
    category: TypeCategory = resolve_type_category(obj)
    topic: Topic = CATEGORY_TOPICS[category]
    logger.trace("Value of type %s classified as %s -> %s", type(obj).__name__, category, topic)
    return topic
