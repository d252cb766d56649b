# topmark:header:start
#
#   project      : REPLference
#   file         : options.py
#   file_relpath : src/replference/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options for the REPLference commands.

Centralizes reusable options (verbosity, color, output format) and their
resolution logic so commands and the group stay thin.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, ParamSpec, TypeVar

import click

from replference.cli.cli_types import EnumChoiceParam
from replference.cli.errors import ReplferenceUsageError
from replference.cli_shared.color import ColorMode
from replference.cli_shared.formats import OutputFormat
from replference.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity level from ``-v`` / ``-q`` counts.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: A logging-style level: TRACE (``-vvv``), DEBUG (``-vv``),
            INFO (``-v``), ERROR (``-q``), WARNING otherwise.

    Raises:
        ReplferenceUsageError: If both flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ReplferenceUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Terse output: bare topic names, no confirmation lines.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def output_format_option(
    formats: Iterable[OutputFormat] = tuple(OutputFormat),
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Return a decorator adding ``--format`` restricted to ``formats``."""
    members: list[OutputFormat] = list(formats)

    def decorator(f: Callable[P, R]) -> Callable[P, R]:
        return click.option(
            "--format",
            "output_format",
            type=EnumChoiceParam(OutputFormat, members=members),
            default=None,
            help=f"Output format ({', '.join(m.value for m in members)}).",
        )(f)

    return decorator


def width_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--width`` (defaults to the terminal width)."""
    return click.option(
        "--width",
        type=click.IntRange(min=0),
        default=None,
        help="Output width in columns (default: terminal width; 0: one name per line).",
    )(f)
