# topmark:header:start
#
#   project      : REPLference
#   file         : categories.py
#   file_relpath : src/replference/topics/categories.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type categories and the ordered rules that classify Python values.

Each [`TypeCategory`][replference.topics.categories.TypeCategory] is bound to
exactly one topic. [`CATEGORY_RULES`][replference.topics.categories.CATEGORY_RULES]
lists the classification rules **most specific first**; the first rule whose
predicate accepts a value decides its category.

Notes:
    Several categories nest (``bool`` is an ``int``, ``int`` is a
    ``numbers.Rational``, a one-character ``str`` is a ``str``). The explicit
    rule order is what makes the nearest category win, so it is tested
    directly rather than left to ``isinstance`` chains scattered across the
    code base.
"""

from __future__ import annotations

import array
import ast
import collections
import collections.abc
import datetime
import decimal
import functools
import io
import math
import numbers
import random
import re
import types
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from replference.topics.base import Topic

if TYPE_CHECKING:
    from collections.abc import Callable


class TypeCategory(str, Enum):
    """Built-in data categories that drive value-based topic lookup."""

    INTEGER = "integer"
    RATIONAL = "rational"
    IRRATIONAL = "irrational"
    FLOAT = "float"
    COMPLEX = "complex"
    CHARACTER = "character"
    STRING = "string"
    RANGE = "range"
    ARRAY = "array"
    TUPLE = "tuple"
    DICT = "dict"
    SET = "set"
    ERROR = "error"
    TYPE = "type"
    FUNCTION = "function"
    FILE = "file"
    MODULE = "module"
    REGEX = "regex"
    DATETIME = "datetime"
    RANDOM = "random"
    METAPROGRAMMING = "metaprogramming"

    def __str__(self) -> str:
        return self.value


CATEGORY_TOPICS: Final[dict[TypeCategory, Topic]] = {
    TypeCategory.INTEGER: Topic.INTEGERS,
    TypeCategory.RATIONAL: Topic.RATIONALS,
    TypeCategory.IRRATIONAL: Topic.IRRATIONALS,
    TypeCategory.FLOAT: Topic.FLOATS,
    TypeCategory.COMPLEX: Topic.COMPLEXES,
    TypeCategory.CHARACTER: Topic.CHARACTERS,
    TypeCategory.STRING: Topic.STRINGS,
    TypeCategory.RANGE: Topic.RANGES,
    TypeCategory.ARRAY: Topic.ARRAYS,
    TypeCategory.TUPLE: Topic.TUPLES,
    TypeCategory.DICT: Topic.DICTS,
    TypeCategory.SET: Topic.SETS,
    TypeCategory.ERROR: Topic.ERRORS,
    TypeCategory.TYPE: Topic.TYPES,
    TypeCategory.FUNCTION: Topic.FUNCTIONS,
    TypeCategory.FILE: Topic.FILES,
    TypeCategory.MODULE: Topic.MODULES,
    TypeCategory.REGEX: Topic.REGEXES,
    TypeCategory.DATETIME: Topic.DATETIMES,
    TypeCategory.RANDOM: Topic.RANDOMS,
    TypeCategory.METAPROGRAMMING: Topic.METAPROGRAMMING,
}

# Named irrational constants of the `math` module. Python stores them as plain
# floats, so the value itself is the discriminator.
IRRATIONAL_CONSTANTS: Final[dict[str, float]] = {
    "π": math.pi,
    "ℯ": math.e,
    "τ": math.tau,
}


def _is_irrational_constant(obj: object) -> bool:
    return type(obj) is float and obj in IRRATIONAL_CONSTANTS.values()


def _is_character(obj: object) -> bool:
    return isinstance(obj, str) and len(obj) == 1


@dataclass(frozen=True)
class CategoryRule:
    """One classification rule.

    Attributes:
        category (TypeCategory): Category assigned when the rule accepts a value.
        types (tuple[type, ...]): Classes checked with ``isinstance``.
        predicate (Callable[[object], bool] | None): Optional value test used
            instead of ``types`` for categories that Python does not model as a
            class (single characters, irrational constants).
        examples (str): Human-readable summary of what the rule accepts.
    """

    category: TypeCategory
    types: tuple[type, ...] = ()
    predicate: Callable[[object], bool] | None = None
    examples: str = ""

    def accepts(self, obj: object) -> bool:
        """Return True if ``obj`` falls in this rule's category.

        Args:
            obj (object): Any Python value.

        Returns:
            bool: True if the rule accepts the value.
        """
        if self.predicate is not None:
            return self.predicate(obj)
        return isinstance(obj, self.types)


CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(TypeCategory.INTEGER, (numbers.Integral,), examples="int, bool"),
    CategoryRule(TypeCategory.RATIONAL, (numbers.Rational,), examples="fractions.Fraction"),
    CategoryRule(
        TypeCategory.IRRATIONAL,
        predicate=_is_irrational_constant,
        examples="math.pi, math.e, math.tau",
    ),
    CategoryRule(TypeCategory.FLOAT, (numbers.Real, decimal.Decimal), examples="float, Decimal"),
    CategoryRule(TypeCategory.COMPLEX, (numbers.Complex,), examples="complex"),
    CategoryRule(TypeCategory.CHARACTER, predicate=_is_character, examples="str of length 1"),
    CategoryRule(TypeCategory.STRING, (str, bytes, collections.UserString), examples="str, bytes"),
    CategoryRule(TypeCategory.RANGE, (range,), examples="range"),
    CategoryRule(
        TypeCategory.ARRAY,
        (list, array.array, bytearray, collections.deque, collections.UserList, memoryview),
        examples="list, array.array, bytearray, deque",
    ),
    CategoryRule(TypeCategory.TUPLE, (tuple,), examples="tuple, namedtuple"),
    CategoryRule(TypeCategory.DICT, (collections.abc.Mapping,), examples="dict, OrderedDict"),
    CategoryRule(TypeCategory.SET, (collections.abc.Set,), examples="set, frozenset"),
    CategoryRule(TypeCategory.ERROR, (BaseException,), examples="exception instances"),
    CategoryRule(TypeCategory.TYPE, (type,), examples="classes"),
    CategoryRule(
        TypeCategory.FUNCTION,
        (
            types.FunctionType,
            types.BuiltinFunctionType,
            types.MethodType,
            types.MethodWrapperType,
            types.WrapperDescriptorType,
            types.MethodDescriptorType,
            types.ClassMethodDescriptorType,
            functools.partial,
        ),
        examples="def, lambda, builtins, bound methods",
    ),
    CategoryRule(TypeCategory.FILE, (io.IOBase,), examples="open(), io.StringIO"),
    CategoryRule(TypeCategory.MODULE, (types.ModuleType,), examples="imported modules"),
    CategoryRule(TypeCategory.REGEX, (re.Pattern, re.Match), examples="re.compile()"),
    CategoryRule(
        TypeCategory.DATETIME,
        (datetime.date, datetime.time, datetime.timedelta, datetime.tzinfo),
        examples="date, datetime, time, timedelta",
    ),
    CategoryRule(TypeCategory.RANDOM, (random.Random,), examples="random.Random"),
    CategoryRule(
        TypeCategory.METAPROGRAMMING,
        (ast.AST, types.CodeType),
        examples="ast nodes, code objects",
    ),
)
