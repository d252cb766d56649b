# topmark:header:start
#
#   project      : REPLference
#   file         : topics.py
#   file_relpath : src/replference/cli/commands/topics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""REPLference `topics` command.

Lists all topics in name-resolution order. Useful for discovering which
names ``man`` and ``fun`` accept. With ``-q`` only the names are printed,
one per line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from replference.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    library_errors,
    print_json,
    print_ndjson,
)
from replference.cli.options import output_format_option
from replference.cli_shared.formats import OutputFormat
from replference.cli_shared.markdown import render_markdown_table
from replference.constants import REPLFERENCE_VERSION
from replference.topics.info import all_topic_infos

if TYPE_CHECKING:
    from replference.cli_shared.console_api import ConsoleLike
    from replference.topics.info import TopicInfo


def _serialize(info: TopicInfo, *, details: bool) -> dict[str, Any]:
    data: dict[str, Any] = {"name": info.topic.value, "description": info.description}
    if details:
        data.update(
            {
                "position": info.position,
                "pattern": info.pattern,
                "aliases": list(info.aliases),
                "categories": [c.value for c in info.categories],
                "extended": info.has_extended,
            }
        )
    return data


@click.command(
    name="topics",
    help="List all reference topics.",
    epilog="""
Topics are listed in the order their name patterns are tried: the first
pattern matching the start of a name (case-insensitively) wins.
""",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show name patterns, aliases, type categories and extended listings.",
)
@output_format_option()
def topics_command(
    *,
    show_details: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List topics.

    Args:
        show_details (bool): Show patterns, aliases and type categories.
        output_format (OutputFormat | None): Output format.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    with library_errors():
        infos: list[TopicInfo] = all_topic_infos()

    if fmt == OutputFormat.JSON:
        print_json(console, [_serialize(i, details=show_details) for i in infos])
        return
    if fmt == OutputFormat.NDJSON:
        print_ndjson(console, (_serialize(i, details=show_details) for i in infos))
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print("# Reference Topics\n")
        console.print(f"REPLference **{REPLFERENCE_VERSION}** documents the following topics:\n")
        if show_details:
            headers: list[str] = ["#", "Topic", "Pattern", "Aliases", "Categories", "Description"]
            rows: list[list[str]] = [
                [
                    str(i.position),
                    f"`{i.topic.value}`",
                    f"`{i.pattern}`",
                    ", ".join(i.aliases),
                    ", ".join(c.value for c in i.categories),
                    i.description,
                ]
                for i in infos
            ]
            console.print(render_markdown_table(headers, rows, right_aligned={0}))
        else:
            rows = [[f"`{i.topic.value}`", i.description] for i in infos]
            console.print(render_markdown_table(["Topic", "Description"], rows))
        return

    if vlevel < 0:
        for info in infos:
            console.print(info.topic.value)
        return

    if vlevel > 0:
        console.print(console.styled("Reference topics:\n", bold=True, underline=True))

    num_width: int = len(str(len(infos)))
    name_width: int = max(len(i.topic.value) for i in infos)
    for info in infos:
        name: str = f"{info.topic.value:<{name_width}}"
        console.print(
            f"{info.position:>{num_width}}. {name} {console.styled(info.description, dim=True)}"
        )
        if show_details:
            console.print(f"      pattern    : {info.pattern}")
            if info.aliases:
                console.print(f"      aliases    : {', '.join(info.aliases)}")
            if info.categories:
                console.print(f"      categories : {', '.join(c.value for c in info.categories)}")
            if info.has_extended:
                console.print("      extended   : yes")
