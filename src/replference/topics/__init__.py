# topmark:header:start
#
#   project      : REPLference
#   file         : __init__.py
#   file_relpath : src/replference/topics/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Topics and topic resolution for REPLference.

Modules:
    base: the `Topic` enum and the `TopicPattern` rule.
    patterns: the ordered name-resolution table.
    categories: type categories and the ordered value-classification rules.
    resolver: name- and value-based topic lookup.
    info: descriptive metadata per topic.
"""

from __future__ import annotations

from replference.topics.base import Topic, TopicPattern
from replference.topics.categories import CATEGORY_RULES, CATEGORY_TOPICS, TypeCategory
from replference.topics.patterns import TOPIC_PATTERNS
from replference.topics.resolver import (
    resolve_topic_by_name,
    resolve_topic_by_type,
    resolve_type_category,
)

__all__ = [
    "CATEGORY_RULES",
    "CATEGORY_TOPICS",
    "TOPIC_PATTERNS",
    "Topic",
    "TopicPattern",
    "TypeCategory",
    "resolve_topic_by_name",
    "resolve_topic_by_type",
    "resolve_type_category",
]
