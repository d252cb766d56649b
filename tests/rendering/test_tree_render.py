# topmark:header:start
#
#   project      : REPLference
#   file         : test_tree_render.py
#   file_relpath : tests/rendering/test_tree_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for type tree rendering."""

from __future__ import annotations

from replference.rendering.tree import render_type_tree, tree_payload
from replference.typetree import TypeNode

TREE = TypeNode(
    name="A",
    cls=object,
    children=(
        TypeNode(name="B", cls=object, children=(TypeNode(name="D", cls=object),)),
        TypeNode(name="C", cls=object, children=(TypeNode(name="E", cls=object),)),
    ),
)


def test_render_type_tree_draws_branches() -> None:
    assert render_type_tree(TREE) == [
        "A",
        "├─ B",
        "│  └─ D",
        "└─ C",
        "   └─ E",
    ]


def test_leaf_renders_as_single_line() -> None:
    assert render_type_tree(TypeNode(name="bool", cls=bool)) == ["bool"]


def test_tree_payload_is_nested() -> None:
    assert tree_payload(TREE) == {
        "name": "A",
        "children": [
            {"name": "B", "children": [{"name": "D", "children": []}]},
            {"name": "C", "children": [{"name": "E", "children": []}]},
        ],
    }
