# topmark:header:start
#
#   project      : REPLference
#   file         : test_main.py
#   file_relpath : tests/cli/test_main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the command group: help, verbosity and color flags."""

from __future__ import annotations

import pytest

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli


def test_no_subcommand_prints_hint_and_help() -> None:
    result = run_cli(["--no-color"])
    assert_SUCCESS(result)
    assert result.output.startswith("Hint: use 'replference man TOPIC'")
    for command in ("man", "fun", "subtree", "topics", "inventory", "version"):
        assert command in result.output


def test_help_option_aliases() -> None:
    assert run_cli(["-h"]).output == run_cli(["--help"]).output


def test_verbose_and_quiet_are_exclusive() -> None:
    result = run_cli(["-v", "-q", "version"])
    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


@pytest.mark.parametrize("mode", ["always", "ALWAYS", "never", "auto"])
def test_color_modes_are_accepted(mode: str) -> None:
    assert_SUCCESS(run_cli(["--color", mode, "version"]))


def test_invalid_color_mode_is_rejected_by_click() -> None:
    result = run_cli(["--color", "sometimes", "version"])
    assert result.exit_code == 2


def test_color_always_styles_output() -> None:
    result = run_cli(["--color", "always", "fun", "sets", "--width", "0"])
    assert_SUCCESS(result)
    assert "\x1b[" in result.output


def test_no_color_wins() -> None:
    result = run_cli(["--color", "always", "--no-color", "fun", "sets", "--width", "0"])
    assert_SUCCESS(result)
    assert "\x1b[" not in result.output
