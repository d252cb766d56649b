# topmark:header:start
#
#   project      : REPLference
#   file         : __main__.py
#   file_relpath : src/replference/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point: ``python -m replference`` runs the ``replference`` CLI."""

from __future__ import annotations

from replference.cli.main import cli

if __name__ == "__main__":
    cli()
