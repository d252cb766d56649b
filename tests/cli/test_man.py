# topmark:header:start
#
#   project      : REPLference
#   file         : test_man.py
#   file_relpath : tests/cli/test_man.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the `man` command."""

from __future__ import annotations

import pytest

from replference.manuals import get_manual
from replference.topics import Topic
from tests.cli.conftest import assert_SUCCESS, assert_UNSUPPORTED_TYPE, assert_USAGE_ERROR, run_cli


def test_man_by_name_renders_manual() -> None:
    result = run_cli(["--no-color", "man", "dict", "--width", "80"])
    assert_SUCCESS(result)
    assert "DICTS" in result.output
    assert "\x1b[" not in result.output


def test_man_markdown_prints_source() -> None:
    result = run_cli(["man", "STRING", "--format", "markdown"])
    assert_SUCCESS(result)
    assert result.output == get_manual(Topic.STRINGS)


def test_man_unknown_name_prints_nothing() -> None:
    result = run_cli(["--no-color", "man", "42"])
    assert_SUCCESS(result)
    assert result.output == ""


def test_man_value_dispatches_on_type() -> None:
    result = run_cli(["man", "--value", "'a'", "--format", "markdown"])
    assert_SUCCESS(result)
    assert result.output == get_manual(Topic.CHARACTERS)

    result = run_cli(["man", "--value", "{1: 2}", "--format", "markdown"])
    assert result.output == get_manual(Topic.DICTS)


def test_man_value_rejects_non_literals() -> None:
    result = run_cli(["--no-color", "man", "--value", "open('x')"])
    assert_USAGE_ERROR(result)
    assert "Not a Python literal" in result.output


def test_man_value_unsupported_type() -> None:
    result = run_cli(["--no-color", "man", "--value", "None"])
    assert_UNSUPPORTED_TYPE(result)
    assert "NoneType" in result.output


def test_man_rejects_machine_formats() -> None:
    result = run_cli(["man", "dict", "--format", "json"])
    assert result.exit_code == 2


@pytest.mark.parametrize("literal", ["{[1]: 2}", "{{1}}", "[" * 2000 + "]" * 2000])
def test_man_value_unusable_literal_is_a_usage_error(literal: str) -> None:
    result = run_cli(["--no-color", "man", "--value", literal])
    assert_USAGE_ERROR(result)
    assert "Not a Python literal" in result.output


def test_man_value_bytes_selects_strings() -> None:
    result = run_cli(["man", "--value", "b'abc'", "--format", "markdown"])
    assert_SUCCESS(result)
    assert result.output == get_manual(Topic.STRINGS)
