# topmark:header:start
#
#   project      : REPLference
#   file         : console_api.py
#   file_relpath : src/replference/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The output surface shared by the interactive API and the CLI commands."""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Where REPLference prints program output.

    `explain`, `list_operations` and `print_type_tree` accept any object with
    this shape, so callers can capture output (e.g. into a `StringIO`-backed
    [`ClickConsole`][replference.cli_shared.console.ClickConsole]).
    """

    enable_color: bool

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Print program output."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Print an error message."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return ``text`` with terminal styles, or unchanged when color is off."""
        ...
