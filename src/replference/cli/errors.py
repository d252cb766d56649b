# topmark:header:start
#
#   project      : REPLference
#   file         : errors.py
#   file_relpath : src/replference/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the REPLference CLI.

Library errors ([`replference.errors`][]) are converted into these at the
command boundary; each carries the process exit code.

Styling:
    Errors prefer the project console if available (see `show()`); without a
    console in the Click context they fall back to Click's default display.
"""

from __future__ import annotations

from typing import IO, Any

import click

from replference.cli_shared.exit_codes import ExitCode


class ReplferenceCliError(click.ClickException):
    """Base class for all REPLference CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class ReplferenceUsageError(ReplferenceCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ReplferenceUnsupportedTypeError(ReplferenceCliError):
    """Error for values whose type has no reference topic."""

    exit_code = ExitCode.UNSUPPORTED_TYPE


class ReplferenceContentError(ReplferenceCliError):
    """Error for missing or malformed bundled content."""

    exit_code = ExitCode.CONTENT_ERROR


class ReplferenceIOError(ReplferenceCliError):
    """Error for I/O errors writing output files."""

    exit_code = ExitCode.IO_ERROR
