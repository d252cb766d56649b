# topmark:header:start
#
#   project      : REPLference
#   file         : __init__.py
#   file_relpath : src/replference/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output plumbing shared by the CLI and the library API.

Holds the console protocol and its Click-backed implementation, color-mode
resolution, exit codes, output formats and Markdown tables. Only
`console` imports Click; the other modules use the standard library alone.
"""

from __future__ import annotations
