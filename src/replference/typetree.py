# topmark:header:start
#
#   project      : REPLference
#   file         : typetree.py
#   file_relpath : src/replference/typetree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subclass trees built from the live interpreter.

The tree reflects ``cls.__subclasses__()`` at call time: only real subclasses
of currently imported modules are visible. Virtual subclasses registered on an
ABC (``numbers.Integral.register(...)``) do not appear.
"""

from __future__ import annotations

import builtins
import pkgutil
from dataclasses import dataclass, field

from replference.config.logging import ReplferenceLogger, get_logger
from replference.errors import UnsupportedTypeError

logger: ReplferenceLogger = get_logger(__name__)


@dataclass(frozen=True)
class TypeNode:
    """One class in a subclass tree.

    Attributes:
        name (str): Display name (``int``, ``collections.OrderedDict``).
        cls (type): The class itself.
        children (tuple[TypeNode, ...]): Direct subclasses, sorted by name.
    """

    name: str
    cls: type = field(repr=False, compare=False)
    children: tuple[TypeNode, ...] = ()


def type_display_name(cls: type) -> str:
    """Return the dotted display name of ``cls``, omitting ``builtins.``."""
    module: str = cls.__module__
    if module == "builtins":
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def _subclasses(cls: type) -> list[type]:
    # `type.__subclasses__` is unbound for `type` itself
    subs: list[type] = type.__subclasses__(cls) if cls is type else cls.__subclasses__()
    return sorted(subs, key=type_display_name)


def build_type_tree(cls: type, *, depth: int | None = 1) -> TypeNode:
    """Build the subclass tree of ``cls``.

    Args:
        cls (type): Root class.
        depth (int | None): Levels of subclasses to include; ``1`` lists the
            immediate subclasses only, ``None`` walks the whole hierarchy.

    Returns:
        TypeNode: The tree rooted at ``cls``.

    Raises:
        UnsupportedTypeError: If ``cls`` is not a class.
        ValueError: If ``depth`` is negative.
    """
    if not isinstance(cls, type):
        raise UnsupportedTypeError(cls)
    if depth is not None and depth < 0:
        raise ValueError("depth must be >= 0")
    return _build(cls, depth)


def _build(cls: type, depth: int | None) -> TypeNode:
    children: tuple[TypeNode, ...] = ()
    if depth is None or depth > 0:
        next_depth: int | None = None if depth is None else depth - 1
        children = tuple(_build(sub, next_depth) for sub in _subclasses(cls))
    return TypeNode(name=type_display_name(cls), cls=cls, children=children)


def resolve_dotted_name(name: str) -> object:
    """Resolve a (dotted) name such as ``int`` or ``collections.abc.Mapping``.

    Bare names are looked up in `builtins` first. The result is not checked:
    pass it to `build_type_tree`, which rejects non-classes.

    Args:
        name (str): Object name.

    Returns:
        object: The named object.

    Raises:
        ValueError: If the name cannot be imported.
    """
    if "." not in name and hasattr(builtins, name):
        obj: object = getattr(builtins, name)
    else:
        try:
            obj = pkgutil.resolve_name(name)
        except (ImportError, AttributeError, ValueError) as exc:
            raise ValueError(f"Cannot resolve '{name}': {exc}") from exc
    logger.debug("Resolved %r to %r", name, obj)
    return obj
