# topmark:header:start
#
#   project      : REPLference
#   file         : main.py
#   file_relpath : src/replference/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""REPLference command-line interface.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console and verbosity from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from replference.cli.commands.fun import fun_command
from replference.cli.commands.inventory import inventory_command
from replference.cli.commands.man import man_command
from replference.cli.commands.subtree import subtree_command
from replference.cli.commands.topics import topics_command
from replference.cli.commands.version import version_command
from replference.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from replference.cli_shared.color import ColorMode, color_enabled
from replference.cli_shared.console import ClickConsole
from replference.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from replference.cli_shared.console_api import ConsoleLike
    from replference.config.logging import ReplferenceLogger

logger: ReplferenceLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is driven by the environment only
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = color_enabled(effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: %s", {k: v for k, v in ctx.obj.items() if k != "console"})


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="REPLference: a quick reference for Python's built-in types and standard library.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the REPLference CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'replference man TOPIC' or 'replference fun TOPIC'.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(man_command)

cli.add_command(fun_command)

cli.add_command(subtree_command)

cli.add_command(topics_command)

cli.add_command(inventory_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
