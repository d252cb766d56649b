# topmark:header:start
#
#   project      : REPLference
#   file         : test_color.py
#   file_relpath : tests/cli_shared/test_color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for color-mode resolution."""

from __future__ import annotations

import pytest

from replference.cli_shared.color import ColorMode, color_enabled


@pytest.fixture(autouse=True)
def clean_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


def test_explicit_modes_override_tty_and_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert color_enabled(ColorMode.ALWAYS, isatty=False)
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert not color_enabled(ColorMode.NEVER, isatty=True)


def test_no_color_disables_auto(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "")
    assert not color_enabled(ColorMode.AUTO, isatty=True)


def test_force_color_enables_auto(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("NO_COLOR", "1")
    assert color_enabled(ColorMode.AUTO, isatty=False)


@pytest.mark.parametrize("value", ["0", ""])
def test_force_color_off_values_are_ignored(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("FORCE_COLOR", value)
    assert not color_enabled(isatty=False)


@pytest.mark.parametrize("isatty", [True, False])
def test_auto_follows_tty(isatty: bool) -> None:
    assert color_enabled(None, isatty=isatty) is isatty
    assert color_enabled(ColorMode.AUTO, isatty=isatty) is isatty
