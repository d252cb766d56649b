# topmark:header:start
#
#   project      : REPLference
#   file         : test_subtree.py
#   file_relpath : tests/cli/test_subtree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the `subtree` command."""

from __future__ import annotations

import json

from tests.cli.conftest import assert_SUCCESS, assert_UNSUPPORTED_TYPE, assert_USAGE_ERROR, run_cli


def test_subtree_of_builtin() -> None:
    result = run_cli(["--no-color", "subtree", "int"])
    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert lines[0] == "int"
    assert any(line.endswith("─ bool") for line in lines)


def test_subtree_depth_zero() -> None:
    result = run_cli(["subtree", "Exception", "--depth", "0"])
    assert_SUCCESS(result)
    assert result.output == "Exception\n"


def test_subtree_dotted_name_all_levels() -> None:
    """Other imported libraries may register extra subclasses; only the chain is fixed."""
    result = run_cli(["subtree", "numbers.Number", "--all"])
    assert_SUCCESS(result)
    lines = result.output.splitlines()
    assert lines[0] == "numbers.Number"
    names = [line.lstrip("│├└─ ") for line in lines]
    chain = ["numbers.Complex", "numbers.Real", "numbers.Rational", "numbers.Integral"]
    positions = [names.index(n) for n in chain]
    assert positions == sorted(positions)
    depths = [len(lines[p]) - len(names[p]) for p in positions]
    assert depths == [3, 6, 9, 12]


class Shape:
    pass


class Polygon(Shape):
    pass


class Circle(Shape):
    pass


class Square(Polygon):
    pass


def test_subtree_exact_shape_for_local_classes() -> None:
    result = run_cli(["subtree", f"{__name__}:Shape", "--all"])
    assert_SUCCESS(result)
    prefix = f"{__name__}."
    assert result.output.replace(prefix, "").splitlines() == [
        "Shape",
        "├─ Circle",
        "└─ Polygon",
        "   └─ Square",
    ]


def test_subtree_json() -> None:
    result = run_cli(["subtree", "ArithmeticError", "--format", "json"])
    assert_SUCCESS(result)
    payload = json.loads(result.output)
    assert payload["name"] == "ArithmeticError"
    assert "ZeroDivisionError" in [c["name"] for c in payload["children"]]
    assert all(c["children"] == [] for c in payload["children"])


def test_subtree_unknown_name() -> None:
    result = run_cli(["--no-color", "subtree", "no_such_class_here"])
    assert_USAGE_ERROR(result)
    assert "Cannot resolve" in result.output


def test_subtree_non_class() -> None:
    result = run_cli(["--no-color", "subtree", "len"])
    assert_UNSUPPORTED_TYPE(result)


def test_subtree_negative_depth_rejected_by_click() -> None:
    assert run_cli(["subtree", "int", "--depth", "-1"]).exit_code == 2
