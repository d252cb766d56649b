# topmark:header:start
#
#   project      : REPLference
#   file         : subtree.py
#   file_relpath : src/replference/cli/commands/subtree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""REPLference `subtree` command.

Prints the subclass tree of a class named on the command line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from replference.cli.cmd_common import get_console, library_errors, print_json
from replference.cli.errors import ReplferenceUsageError
from replference.cli.options import output_format_option
from replference.cli_shared.formats import OutputFormat
from replference.rendering.tree import render_type_tree, tree_payload
from replference.typetree import build_type_tree, resolve_dotted_name

if TYPE_CHECKING:
    from replference.cli_shared.console_api import ConsoleLike
    from replference.typetree import TypeNode


@click.command(
    name="subtree",
    help="Show the subclass tree of a class.",
    epilog="""
NAME is a builtin name (int, Exception) or a dotted import path
(collections.abc.Mapping, numbers.Number). Only subclasses from modules that
are currently imported are shown; virtual subclasses of ABCs are not.
""",
)
@click.argument("name", metavar="NAME")
@click.option(
    "--depth",
    type=click.IntRange(min=0),
    default=1,
    show_default=True,
    help="Levels of subclasses to show.",
)
@click.option(
    "--all",
    "unlimited",
    is_flag=True,
    help="Show the complete hierarchy (overrides --depth).",
)
@output_format_option((OutputFormat.DEFAULT, OutputFormat.JSON))
def subtree_command(
    *,
    name: str,
    depth: int = 1,
    unlimited: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the subclass tree of ``name``.

    Args:
        name (str): Builtin or dotted class name.
        depth (int): Levels of subclasses to show.
        unlimited (bool): Walk the whole hierarchy.
        output_format (OutputFormat | None): ``default`` (tree) or ``json``.
    """
    console: ConsoleLike = get_console()

    try:
        cls: object = resolve_dotted_name(name)
    except ValueError as exc:
        raise ReplferenceUsageError(str(exc)) from exc

    with library_errors():
        tree: TypeNode = build_type_tree(cls, depth=None if unlimited else depth)  # type: ignore[arg-type]

    if output_format == OutputFormat.JSON:
        print_json(console, tree_payload(tree))
        return
    for line in render_type_tree(tree):
        console.print(line)
