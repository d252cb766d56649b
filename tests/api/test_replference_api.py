# topmark:header:start
#
#   project      : REPLference
#   file         : test_replference_api.py
#   file_relpath : tests/api/test_replference_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the public interactive API."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

import replference
from replference import api
from replference.errors import UnsupportedTypeError
from replference.manuals import get_manual
from replference.topics import Topic

if TYPE_CHECKING:
    from io import StringIO

    from replference.cli_shared.console import ClickConsole
    from tests.conftest import Captured


def test_public_surface() -> None:
    assert sorted(api.__all__) == [
        "explain",
        "list_operations",
        "print_type_tree",
        "resolve_topic",
        "topic_info",
    ]
    for name in ("explain", "list_operations", "print_type_tree", "__version__"):
        assert hasattr(replference, name)


def test_resolve_topic_dispatch() -> None:
    assert api.resolve_topic(Topic.CHARACTERS) is Topic.CHARACTERS
    assert api.resolve_topic("dicts") is Topic.DICTS
    assert api.resolve_topic({"a": 1}) is Topic.DICTS
    assert api.resolve_topic("no-such-topic-0") is None


def test_explain_raw_prints_manual_source(captured: Captured) -> None:
    assert api.explain("dicts", console=captured.console, raw=True) is Topic.DICTS
    assert captured.text == get_manual(Topic.DICTS)


def test_explain_is_stable_across_calls(captured: Captured) -> None:
    api.explain(42, console=captured.console, width=80)
    first = captured.text
    api.explain(42, console=captured.console, width=80)
    assert captured.text == first * 2
    assert first.strip()


def test_explain_unknown_name_is_silent(captured: Captured) -> None:
    assert api.explain("0-nothing", console=captured.console) is None
    assert captured.text == ""
    assert captured.err.getvalue() == ""


def test_explain_unsupported_value_raises(captured: Captured) -> None:
    with pytest.raises(UnsupportedTypeError):
        api.explain(object(), console=captured.console)
    assert captured.text == ""


def test_list_operations_core_only_by_default(captured: Captured) -> None:
    assert api.list_operations(42, console=captured.console, width=0) is Topic.INTEGERS
    assert "Stdlib" not in captured.lines
    assert captured.lines[0] == "Constants"
    assert "sys.maxsize" in captured.lines


def test_list_operations_extended(captured: Captured) -> None:
    api.list_operations(42, extended=True, console=captured.console, width=0)
    lines = captured.lines
    assert "Stdlib" in lines
    assert lines.index("Operators") < lines.index("Stdlib")
    assert "math.prod" in lines


def test_list_operations_keeps_dict_group_order(captured: Captured) -> None:
    api.list_operations("dicts", console=captured.console, width=0)
    titles = [t for t in ("Constants", "Macros", "Methods", "Types", "Operators") if t in captured.lines]
    assert [captured.lines.index(t) for t in titles] == sorted(
        captured.lines.index(t) for t in titles
    )
    assert len(titles) == 5


def test_list_operations_unknown_name(captured: Captured) -> None:
    assert api.list_operations("9lives", console=captured.console) is None
    assert captured.text == ""


def test_list_operations_with_color(color_console: tuple[ClickConsole, StringIO]) -> None:
    console, buffer = color_console
    api.list_operations("sets", console=console, width=0)
    assert "\x1b[" in buffer.getvalue()


def test_print_type_tree_of_int(captured: Captured) -> None:
    tree = api.print_type_tree(int, console=captured.console)
    assert tree.cls is int
    assert captured.lines[0] == "int"
    assert any(line.endswith("─ bool") for line in captured.lines[1:])
    assert all(child.children == () for child in tree.children)


def test_print_type_tree_rejects_instances(captured: Captured) -> None:
    with pytest.raises(UnsupportedTypeError):
        api.print_type_tree(42, console=captured.console)  # type: ignore[arg-type]


def test_str_is_always_a_name(captured: Captured) -> None:
    assert api.explain("hello", console=captured.console) is None
    assert captured.text == ""
    assert api.explain(b"hello", console=captured.console, raw=True) is Topic.STRINGS
    assert captured.text == get_manual(Topic.STRINGS)
