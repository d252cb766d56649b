# topmark:header:start
#
#   project      : REPLference
#   file         : man.py
#   file_relpath : src/replference/cli/commands/man.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""REPLference `man` command.

Prints the manual of a topic, looked up by name (default) or by the type of a
Python literal (``--value``).
"""

from __future__ import annotations

import click

from replference.api import explain
from replference.cli.cmd_common import get_console, library_errors
from replference.cli.commands.common import subject_argument, subject_from_cli
from replference.cli.options import output_format_option, width_option
from replference.cli_shared.formats import OutputFormat
from replference.topics.base import Topic


@click.command(
    name="man",
    help="Show the manual of a topic.",
    epilog="""
TOPIC is matched case-insensitively as a prefix against the topic patterns
(see 'replference topics --long'); names that match nothing print nothing.
With --value, TOPIC is parsed as a Python literal and its type selects the topic.
""",
)
@subject_argument
@output_format_option((OutputFormat.DEFAULT, OutputFormat.MARKDOWN))
@width_option
def man_command(
    *,
    topic: str,
    as_value: bool = False,
    output_format: OutputFormat | None = None,
    width: int | None = None,
) -> None:
    """Show the manual of a topic.

    Args:
        topic (str): Topic name, or a Python literal with ``--value``.
        as_value (bool): Dispatch on the literal's type instead of the name.
        output_format (OutputFormat | None): ``default`` renders for the
            terminal, ``markdown`` prints the Markdown source.
        width (int | None): Render width; defaults to the terminal width.
    """
    ctx: click.Context = click.get_current_context()
    with library_errors():
        subject: str | Topic = subject_from_cli(topic, as_value=as_value)
        explain(
            subject,
            console=get_console(ctx),
            width=width,
            raw=output_format == OutputFormat.MARKDOWN,
        )
