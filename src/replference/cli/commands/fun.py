# topmark:header:start
#
#   project      : REPLference
#   file         : fun.py
#   file_relpath : src/replference/cli/commands/fun.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""REPLference `fun` command.

Lists the categorized function, method and operator names of a topic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from replference.api import list_operations, resolve_topic
from replference.cli.cmd_common import get_console, library_errors, print_json, print_ndjson
from replference.cli.commands.common import subject_argument, subject_from_cli
from replference.cli.options import output_format_option, width_option
from replference.cli_shared.formats import OutputFormat
from replference.listings.loader import get_listings
from replference.rendering.listing import listings_payload, render_listings_markdown

if TYPE_CHECKING:
    from replference.cli_shared.console_api import ConsoleLike
    from replference.listings.model import TopicListings
    from replference.topics.base import Topic


@click.command(
    name="fun",
    help="List the functions, methods and operators of a topic.",
    epilog="""
Groups are printed in authoring order. --extended adds the standard-library
groups (e.g. 'Stdlib'). Names that match no topic print nothing.
""",
)
@subject_argument
@click.option(
    "--extended",
    is_flag=True,
    help="Also list the extended (standard library) groups.",
)
@width_option
@output_format_option()
def fun_command(
    *,
    topic: str,
    as_value: bool = False,
    extended: bool = False,
    width: int | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """List the operations of a topic.

    Args:
        topic (str): Topic name, or a Python literal with ``--value``.
        as_value (bool): Dispatch on the literal's type instead of the name.
        extended (bool): Include extended listings.
        width (int | None): Grid width; defaults to the terminal width.
        output_format (OutputFormat | None): Output format.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    with library_errors():
        subject: str | Topic = subject_from_cli(topic, as_value=as_value)
        if fmt == OutputFormat.DEFAULT:
            list_operations(subject, extended=extended, console=console, width=width)
            return

        resolved: Topic | None = resolve_topic(subject)
        if resolved is None:
            return
        topic_listings: TopicListings = get_listings(resolved)

    if fmt == OutputFormat.JSON:
        print_json(console, listings_payload(topic_listings, extended=extended))
    elif fmt == OutputFormat.NDJSON:
        print_ndjson(
            console,
            (
                {"topic": resolved.value, **listing.to_dict()}
                for listing in topic_listings.select(extended=extended)
            ),
        )
    else:
        console.print(
            render_listings_markdown(
                topic_listings.select(extended=extended),
                heading=resolved.value.capitalize(),
            ),
            nl=False,
        )
