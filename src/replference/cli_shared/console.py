# topmark:header:start
#
#   project      : REPLference
#   file         : console.py
#   file_relpath : src/replference/cli_shared/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The console that manuals, listings and trees are printed through.

Output goes through `click.echo`, which strips ANSI styles when color is off.
Diagnostics never go here: they belong to `logging`.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from replference.cli_shared.color import color_enabled


class ClickConsole:
    """Click-backed [`ConsoleLike`][replference.cli_shared.console_api.ConsoleLike].

    Streams left as ``None`` are looked up on each write, so a console created
    before `sys.stdout` is swapped (as `click.testing.CliRunner` does) still
    writes to the current stream.

    Attributes:
        enable_color (bool): Whether styles are emitted.
        out (TextIO | None): Program output stream; ``None`` means `sys.stdout`.
        err (TextIO | None): Error stream; ``None`` means `sys.stderr`.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO | None = out
        self.err: TextIO | None = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Print program output."""
        click.echo(text, nl=nl, file=self.out or sys.stdout, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Print a bright red error to the error stream."""
        click.secho(
            text, nl=nl, file=self.err or sys.stderr, color=self.enable_color, fg="bright_red"
        )

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` wrapped by `click.style`, or unchanged when color is off.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): `click.style` keywords (``fg``, ``bold``,
                ``dim``, ``underline``, ``reverse``, ...).

        Returns:
            str: The styled or plain text.
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)


def default_console() -> ClickConsole:
    """Return the console used by the interactive API when none is passed.

    Color follows ``FORCE_COLOR`` / ``NO_COLOR`` and whether stdout is a terminal.
    """
    return ClickConsole(enable_color=color_enabled())
