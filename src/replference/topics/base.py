# topmark:header:start
#
#   project      : REPLference
#   file         : base.py
#   file_relpath : src/replference/topics/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core topic definitions for REPLference.

Defines the closed [`Topic`][replference.topics.base.Topic] enumeration and the
[`TopicPattern`][replference.topics.base.TopicPattern] rule that maps free-text
names to a topic.

A pattern is a case-insensitive regular expression applied with *prefix*
semantics: it must match at the start of the input but is never anchored at the
end, so ``"integer128"`` still matches the ``integer`` alternative.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from replference.config.logging import ReplferenceLogger, get_logger

logger: ReplferenceLogger = get_logger(__name__)


class Topic(str, Enum):
    """Documentation subjects known to REPLference.

    The member value doubles as the resource stem of the topic's manual
    (``<value>.md``) and listing (``<value>.toml``).
    """

    KEYWORDS = "keywords"
    VARIABLES = "variables"
    OPERATORS = "operators"
    INTEGERS = "integers"
    FLOATS = "floats"
    COMPLEXES = "complexes"
    RATIONALS = "rationals"
    IRRATIONALS = "irrationals"
    CHARACTERS = "characters"
    STRINGS = "strings"
    RANGES = "ranges"
    ARRAYS = "arrays"
    TUPLES = "tuples"
    DICTS = "dicts"
    SETS = "sets"
    TYPES = "types"
    FUNCTIONS = "functions"
    FILES = "files"
    MODULES = "modules"
    REGEXES = "regexes"
    DATETIMES = "datetimes"
    RANDOMS = "randoms"
    SYSTEMS = "systems"
    ERRORS = "errors"
    METAPROGRAMMING = "metaprogramming"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TopicPattern:
    """Binds one case-insensitive name pattern to a topic.

    Attributes:
        topic (Topic): The topic selected when the pattern matches.
        pattern (str): Regular expression matched against the *start* of the
            input (``re.match`` semantics, ``re.IGNORECASE``).
        aliases (tuple[str, ...]): Literal spellings accepted by ``pattern``,
            in the order they are shown to users. Purely informational.
    """

    topic: Topic
    pattern: str
    aliases: tuple[str, ...] = ()

    # Compiled regex (cached at construction)
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # frozen dataclass: bypass __setattr__ for the cached regex
        object.__setattr__(self, "_regex", re.compile(self.pattern, re.IGNORECASE))

    def matches(self, text: str) -> bool:
        """Return True if ``text`` starts with one of the pattern's alternatives.

        Args:
            text (str): Free-text topic name.

        Returns:
            bool: True if the pattern matches a prefix of ``text``.
        """
        return self._regex.match(text) is not None
