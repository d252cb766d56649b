# topmark:header:start
#
#   project      : REPLference
#   file         : inventory.py
#   file_relpath : src/replference/cli/commands/inventory.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""REPLference `inventory` command.

Maintenance tool: classifies the public names of Python modules into listing
groups, as a starting point for curating a listing file.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from replference.cli.cmd_common import get_console, get_effective_verbosity
from replference.cli.errors import ReplferenceIOError, ReplferenceUsageError
from replference.config.logging import get_logger
from replference.inventory import build_inventory, render_inventory_text, render_inventory_toml

if TYPE_CHECKING:
    from replference.cli_shared.console_api import ConsoleLike
    from replference.config.logging import ReplferenceLogger

logger: ReplferenceLogger = get_logger(__name__)


@click.command(
    name="inventory",
    help="Inventory the public names of Python modules.",
    epilog="""
Example: replference inventory builtins operator --format toml --output ops.toml
""",
)
@click.argument("modules", metavar="MODULE...", nargs=-1, required=True)
@click.option(
    "--output",
    "-o",
    "output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write to FILE instead of standard output.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "toml"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Document format: plain text or a TOML listing skeleton.",
)
def inventory_command(
    *,
    modules: tuple[str, ...],
    output: Path | None = None,
    output_format: str = "text",
) -> None:
    """Inventory the public names of ``modules``.

    Args:
        modules (tuple[str, ...]): Importable module names.
        output (Path | None): Output file; standard output when ``None``.
        output_format (str): ``text`` or ``toml``.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    try:
        inventory: dict[str, list[str]] = build_inventory(modules)
    except ImportError as exc:
        raise ReplferenceUsageError(f"Cannot import module: {exc}") from exc

    render = render_inventory_toml if output_format.lower() == "toml" else render_inventory_text
    document: str = render(inventory, modules=modules)

    if output is None:
        console.print(document, nl=False)
        return

    try:
        output.write_text(document, encoding="utf-8")
    except OSError as exc:
        raise ReplferenceIOError(f"Cannot write {output}: {exc}") from exc
    logger.info("Wrote inventory of %d module(s) to %s", len(modules), output)
    if get_effective_verbosity(ctx) >= 0:
        console.print(f"Wrote {sum(len(v) for v in inventory.values())} names to {output}")
