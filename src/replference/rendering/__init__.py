# topmark:header:start
#
#   project      : REPLference
#   file         : __init__.py
#   file_relpath : src/replference/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-free renderers for listings, manuals and type trees.

Renderers return lines or strings; printing is left to a
[`ConsoleLike`][replference.cli_shared.console_api.ConsoleLike].
"""

from __future__ import annotations
