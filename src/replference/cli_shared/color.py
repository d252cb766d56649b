# topmark:header:start
#
#   project      : REPLference
#   file         : color.py
#   file_relpath : src/replference/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color decisions for consoles.

Color is decided once, when a console is created. An explicit choice
(``--color`` / ``--no-color``) wins, then the ``FORCE_COLOR`` and ``NO_COLOR``
environment conventions, then whether stdout is a terminal. Machine-readable
output (JSON, NDJSON) is never styled, whatever this returns.
"""

from __future__ import annotations

import os
import sys
from enum import Enum


class ColorMode(str, Enum):
    """Values of the ``--color`` option."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def _stdout_is_terminal() -> bool:
    try:
        return sys.stdout.isatty()
    except (OSError, ValueError):
        # detached or closed stream
        return False


def color_enabled(mode: ColorMode | None = None, *, isatty: bool | None = None) -> bool:
    """Return whether a console should emit ANSI styles.

    Args:
        mode (ColorMode | None): The requested mode; ``None`` behaves as ``AUTO``.
        isatty (bool | None): Terminal detection override; ``None`` asks
            ``sys.stdout``.

    Returns:
        bool: True if output should be colored.

    Examples:
        >>> color_enabled(ColorMode.NEVER)
        False
    """
    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False

    force_color: str | None = os.environ.get("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False

    return _stdout_is_terminal() if isatty is None else isatty
