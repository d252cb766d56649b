# topmark:header:start
#
#   project      : REPLference
#   file         : cmd_common.py
#   file_relpath : src/replference/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small plumbing helpers shared by the subcommands: state lookup on the Click
context and conversion of library errors into CLI errors.
"""

from __future__ import annotations

import json
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Iterable, Iterator

import click

from replference.cli.errors import ReplferenceContentError, ReplferenceUnsupportedTypeError
from replference.cli_shared.console import default_console
from replference.config.logging import get_logger
from replference.errors import ContentError, UnsupportedTypeError

if TYPE_CHECKING:
    from replference.cli_shared.console_api import ConsoleLike
    from replference.config.logging import ReplferenceLogger

logger: ReplferenceLogger = get_logger(__name__)


def get_console(ctx: click.Context | None = None) -> ConsoleLike:
    """Return the console stored on the Click context.

    Falls back to [`default_console`][replference.cli_shared.console.default_console]
    when no context (or no console) is active, e.g. when a command callback is
    invoked directly from tests.
    """
    ctx = ctx or click.get_current_context(silent=True)
    if ctx is not None and isinstance(ctx.obj, dict) and "console" in ctx.obj:
        console: ConsoleLike = ctx.obj["console"]
        return console
    return default_console()


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity as a count above the default.

    ``0`` is the default (terse), ``1`` for ``-v``, ``2`` for ``-vv``, ``3`` for
    ``-vvv``; ``-q`` yields ``-1``.
    """
    level: int = int((ctx.obj or {}).get("verbosity_level", 30))
    if level >= 40:
        return -1
    return {30: 0, 20: 1, 10: 2}.get(level, 3 if level < 10 else 0)


@contextmanager
def library_errors() -> Iterator[None]:
    """Convert library errors raised inside the block into CLI errors."""
    try:
        yield
    except UnsupportedTypeError as exc:
        logger.debug("Unsupported type: %s", exc)
        raise ReplferenceUnsupportedTypeError(str(exc)) from exc
    except ContentError as exc:
        logger.error("Content error: %s", exc)
        raise ReplferenceContentError(str(exc)) from exc


def print_json(console: ConsoleLike, payload: Any) -> None:
    """Print ``payload`` as one indented JSON document."""
    console.print(json.dumps(payload, indent=2, ensure_ascii=False))


def print_ndjson(console: ConsoleLike, items: Iterable[Any]) -> None:
    """Print each of ``items`` as one compact JSON line."""
    for item in items:
        console.print(json.dumps(item, ensure_ascii=False))
