# topmark:header:start
#
#   project      : REPLference
#   file         : inventory.py
#   file_relpath : src/replference/inventory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Inventory of the public names of Python modules.

Maintenance tooling for the listing data: it classifies every public name of
the given modules into the groups used by the listings, so a maintainer can
start a new listing from real interpreter contents instead of from memory.

Classification:
    - Types: classes.
    - Modules: module objects.
    - Operators: callables defined by the `operator` module.
    - Methods: any other callable.
    - Constants: everything else.

Names missing from a module's ``__all__`` (when it defines one) carry the
``ˣ`` suffix. Names are qualified with their module, except for `builtins`.
"""

from __future__ import annotations

import inspect
from importlib import import_module
from typing import TYPE_CHECKING, Final

import tomlkit

from replference.config.logging import ReplferenceLogger, get_logger
from replference.constants import NON_PUBLIC_MARKER, REPLFERENCE_VERSION

if TYPE_CHECKING:
    from collections.abc import Iterable
    from types import ModuleType

logger: ReplferenceLogger = get_logger(__name__)

GROUPS: Final[tuple[str, ...]] = ("Constants", "Methods", "Modules", "Operators", "Types")

_OPERATOR_MODULES: Final[frozenset[str]] = frozenset({"operator", "_operator"})


def classify(obj: object) -> str:
    """Return the inventory group of ``obj``.

    Args:
        obj (object): A module attribute.

    Returns:
        str: One of [`GROUPS`][replference.inventory.GROUPS].
    """
    if inspect.isclass(obj):
        return "Types"
    if inspect.ismodule(obj):
        return "Modules"
    if callable(obj):
        if getattr(obj, "__module__", None) in _OPERATOR_MODULES:
            return "Operators"
        return "Methods"
    return "Constants"


def _public_names(module: ModuleType) -> Iterable[str]:
    return (n for n in dir(module) if not n.startswith("_"))


def module_inventory(module: ModuleType) -> dict[str, list[str]]:
    """Classify the public names of one module.

    Args:
        module (ModuleType): An imported module.

    Returns:
        dict[str, list[str]]: Group name to qualified names (unsorted).
    """
    exported: set[str] | None = None
    all_names: object = getattr(module, "__all__", None)
    if isinstance(all_names, (list, tuple)):
        exported = {str(n) for n in all_names}

    prefix: str = "" if module.__name__ == "builtins" else f"{module.__name__}."
    groups: dict[str, list[str]] = {g: [] for g in GROUPS}
    for name in _public_names(module):
        try:
            obj: object = getattr(module, name)
        except AttributeError:
            logger.debug("Skipping %s.%s: attribute vanished", module.__name__, name)
            continue
        marker: str = "" if exported is None or name in exported else NON_PUBLIC_MARKER
        groups[classify(obj)].append(f"{prefix}{name}{marker}")
    return groups


def build_inventory(module_names: Iterable[str]) -> dict[str, list[str]]:
    """Build a merged, sorted inventory for several modules.

    Args:
        module_names (Iterable[str]): Importable module names (``"builtins"``,
            ``"os.path"``).

    Returns:
        dict[str, list[str]]: Group name to sorted, de-duplicated names, for
            every group in [`GROUPS`][replference.inventory.GROUPS].

    Raises:
        ImportError: If a module cannot be imported.
    """
    merged: dict[str, set[str]] = {g: set() for g in GROUPS}
    for module_name in module_names:
        module: ModuleType = import_module(module_name)
        for group, names in module_inventory(module).items():
            merged[group].update(names)
        logger.debug("Inventoried module %s", module_name)
    return {g: sorted(merged[g], key=str.lower) for g in GROUPS}


def render_inventory_text(inventory: dict[str, list[str]], *, modules: Iterable[str]) -> str:
    """Render an inventory as a plain-text document.

    A framed banner names the generating command, then each group follows
    as ``# Group`` and one name per line, separated by blank lines.

    Args:
        inventory (dict[str, list[str]]): Output of `build_inventory`.
        modules (Iterable[str]): Module names, for the banner.

    Returns:
        str: The document, ending with a newline.
    """
    banner: str = (
        f"Generated by `replference inventory {' '.join(modules)}` "
        f"(REPLference {REPLFERENCE_VERSION})"
    )
    rule: str = "=" * len(banner)
    out: list[str] = [f"#{rule}", banner, f"{rule}#", ""]
    for group, names in inventory.items():
        out.append(f"# {group}")
        out.extend(names)
        out.append("")
    return "\n".join(out)


def render_inventory_toml(inventory: dict[str, list[str]], *, modules: Iterable[str]) -> str:
    """Render an inventory as a listing skeleton in the bundled TOML layout.

    Empty groups are omitted. The result can be copied into
    ``content/listings/<topic>.toml`` and then curated by hand.

    Args:
        inventory (dict[str, list[str]]): Output of `build_inventory`.
        modules (Iterable[str]): Module names, for the leading comment.

    Returns:
        str: TOML document text.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    doc.add(tomlkit.comment(f"Generated by `replference inventory {' '.join(modules)}`"))
    doc.add(tomlkit.nl())
    for group, names in inventory.items():
        if not names:
            continue
        table = tomlkit.table()
        array = tomlkit.array()
        array.multiline(True)
        array.extend(names)
        table.add("names", array)
        doc.add(group, table)
    return tomlkit.dumps(doc)
