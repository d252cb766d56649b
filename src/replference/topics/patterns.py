# topmark:header:start
#
#   project      : REPLference
#   file         : patterns.py
#   file_relpath : src/replference/topics/patterns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ordered name patterns for topic lookup.

Exports:
    TOPIC_PATTERNS: The resolution table, tried top to bottom; the first
        matching pattern wins.

Notes:
    - Order is part of the contract. Patterns are not guaranteed to be
      disjoint, so moving a row can change what an ambiguous name resolves to.
    - Avoid aliases that are a prefix of another topic's alternative
      (``str`` would capture ``stream``).
"""

from __future__ import annotations

from replference.topics.base import Topic, TopicPattern

TOPIC_PATTERNS: tuple[TopicPattern, ...] = (
    TopicPattern(Topic.KEYWORDS, r"(?:keyword|reserved)", ("keyword", "reserved")),
    TopicPattern(Topic.VARIABLES, r"variable", ("variable",)),
    TopicPattern(Topic.OPERATORS, r"operat(?:or|ion)", ("operator", "operation")),
    TopicPattern(Topic.INTEGERS, r"(?:integer|int|bool)", ("integer", "int", "bool")),
    TopicPattern(Topic.FLOATS, r"(?:float|decimal)", ("float", "decimal")),
    TopicPattern(Topic.COMPLEXES, r"complex", ("complex",)),
    TopicPattern(Topic.RATIONALS, r"(?:rational|fraction)", ("rational", "fraction")),
    TopicPattern(Topic.IRRATIONALS, r"irrational", ("irrational",)),
    TopicPattern(Topic.CHARACTERS, r"(?:character|char)", ("character", "char")),
    TopicPattern(Topic.STRINGS, r"string", ("string",)),
    TopicPattern(Topic.RANGES, r"range", ("range",)),
    TopicPattern(Topic.ARRAYS, r"(?:array|list)", ("array", "list")),
    TopicPattern(Topic.TUPLES, r"(?:tuple|named(.)?tuple)", ("tuple", "namedtuple")),
    TopicPattern(Topic.DICTS, r"(?:dict|mapping)", ("dict", "mapping")),
    TopicPattern(Topic.SETS, r"(?:set|frozenset)", ("set", "frozenset")),
    TopicPattern(Topic.TYPES, r"(?:type|datatype|class)", ("type", "datatype", "class")),
    TopicPattern(
        Topic.FUNCTIONS,
        r"(?:function|method|procedure|lambda)",
        ("function", "method", "procedure", "lambda"),
    ),
    TopicPattern(Topic.FILES, r"(?:file|io|stream)", ("file", "io", "stream")),
    TopicPattern(Topic.MODULES, r"(?:module|package)", ("module", "package")),
    TopicPattern(Topic.REGEXES, r"reg(?:ex|ular)", ("regex", "regular")),
    TopicPattern(Topic.DATETIMES, r"(?:time|date)", ("time", "date")),
    TopicPattern(Topic.RANDOMS, r"rand", ("rand",)),
    TopicPattern(
        Topic.SYSTEMS,
        r"(?:system|sys|subprocess|environ)",
        ("system", "sys", "subprocess", "environ"),
    ),
    TopicPattern(Topic.ERRORS, r"(?:error|exception)", ("error", "exception")),
    TopicPattern(Topic.METAPROGRAMMING, r"(?:meta|ast)", ("meta", "ast")),
)
