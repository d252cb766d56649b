# topmark:header:start
#
#   project      : REPLference
#   file         : __init__.py
#   file_relpath : src/replference/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""REPLference package.

REPLference is an in-REPL quick reference for Python's built-in types and
standard library. Ask it about a topic by name (``explain("dict")``) or by
value (``list_operations(42)``) and it prints a Markdown manual or a
categorized list of the relevant functions, methods and operators.
"""

from __future__ import annotations

from replference.api import explain, list_operations, print_type_tree, resolve_topic, topic_info
from replference.constants import REPLFERENCE_VERSION
from replference.errors import ContentError, ReplferenceError, UnsupportedTypeError
from replference.listings.loader import get_listings
from replference.manuals import get_manual
from replference.topics import (
    Topic,
    TypeCategory,
    resolve_topic_by_name,
    resolve_topic_by_type,
    resolve_type_category,
)

__version__: str = REPLFERENCE_VERSION

__all__: list[str] = [
    "ContentError",
    "ReplferenceError",
    "Topic",
    "TypeCategory",
    "UnsupportedTypeError",
    "explain",
    "get_listings",
    "get_manual",
    "list_operations",
    "print_type_tree",
    "resolve_topic",
    "resolve_topic_by_name",
    "resolve_topic_by_type",
    "resolve_type_category",
    "topic_info",
]
