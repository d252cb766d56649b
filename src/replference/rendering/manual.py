# topmark:header:start
#
#   project      : REPLference
#   file         : manual.py
#   file_relpath : src/replference/rendering/manual.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal rendering of Markdown manuals.

Manuals are rendered with `rich` (headings, emphasis, lists, fenced code) into
a string, which the caller then prints through its console. Rendering is
pure: the same manual, width and color setting always give the same text.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console as RichConsole
from rich.markdown import Markdown

from replference.config.logging import ReplferenceLogger, get_logger

logger: ReplferenceLogger = get_logger(__name__)


def render_manual_text(markdown: str, *, color: bool, width: int) -> str:
    """Render Markdown for a terminal.

    Args:
        markdown (str): Manual source.
        color (bool): Emit ANSI styles when True; plain text otherwise.
        width (int): Target line width.

    Returns:
        str: Rendered text, ending with a newline.
    """
    buffer = StringIO()
    rich_console = RichConsole(
        file=buffer,
        width=max(width, 20),
        force_terminal=color,
        color_system="standard" if color else None,
        highlight=False,
        emoji=False,
    )
    rich_console.print(Markdown(markdown, code_theme="ansi_dark"))
    rendered: str = buffer.getvalue()
    logger.trace("Rendered %d characters of Markdown into %d", len(markdown), len(rendered))
    return rendered.rstrip("\n") + "\n"
