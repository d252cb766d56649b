# topmark:header:start
#
#   project      : REPLference
#   file         : tree.py
#   file_relpath : src/replference/rendering/tree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text rendering of type trees.

```
numbers.Number
└─ numbers.Complex
   └─ numbers.Real
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from replference.typetree import TypeNode

BRANCH: str = "├─ "
LAST_BRANCH: str = "└─ "
PIPE: str = "│  "
SPACE: str = "   "


def render_type_tree(node: TypeNode) -> list[str]:
    """Render ``node`` and its children as tree lines.

    Args:
        node (TypeNode): Root of the tree.

    Returns:
        list[str]: One line per node, root first.
    """
    lines: list[str] = [node.name]
    _render_children(node, prefix="", lines=lines)
    return lines


def _render_children(node: TypeNode, *, prefix: str, lines: list[str]) -> None:
    last: int = len(node.children) - 1
    for i, child in enumerate(node.children):
        is_last: bool = i == last
        lines.append(prefix + (LAST_BRANCH if is_last else BRANCH) + child.name)
        _render_children(child, prefix=prefix + (SPACE if is_last else PIPE), lines=lines)


def tree_payload(node: TypeNode) -> dict[str, Any]:
    """Return a nested JSON-friendly dict (``name`` / ``children``) for ``node``."""
    return {"name": node.name, "children": [tree_payload(c) for c in node.children]}
