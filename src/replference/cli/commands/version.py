# topmark:header:start
#
#   project      : REPLference
#   file         : version.py
#   file_relpath : src/replference/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""REPLference `version` command.

Prints the REPLference version as installed in the active Python environment.
"""

from __future__ import annotations

import platform
from typing import TYPE_CHECKING

import click

from replference.cli.cmd_common import get_console, get_effective_verbosity, print_json
from replference.cli.options import output_format_option
from replference.cli_shared.formats import OutputFormat
from replference.constants import REPLFERENCE_VERSION

if TYPE_CHECKING:
    from replference.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of REPLference.",
)
@output_format_option((OutputFormat.DEFAULT, OutputFormat.JSON, OutputFormat.MARKDOWN))
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of REPLference.

    With ``-v``, the default output also names the Python interpreter whose
    built-ins are being documented.

    Args:
        output_format (OutputFormat | None): Output format.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    python_version: str = platform.python_version()

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        print_json(console, {"version": REPLFERENCE_VERSION, "python": python_version})
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# REPLference Version\n")
        console.print(f"**REPLference version: {REPLFERENCE_VERSION}** (Python {python_version})")
    elif vlevel > 0:
        console.print(console.styled("REPLference version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(REPLFERENCE_VERSION, bold=True)}")
        console.print(console.styled(f"    Python {python_version}", dim=True))
    else:
        console.print(console.styled(REPLFERENCE_VERSION, bold=True))
