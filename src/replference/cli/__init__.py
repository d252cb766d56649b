# topmark:header:start
#
#   project      : REPLference
#   file         : __init__.py
#   file_relpath : src/replference/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command-line interface for REPLference.

Entry point: [`replference.cli.main.cli`][] (console script ``replference``).
"""
