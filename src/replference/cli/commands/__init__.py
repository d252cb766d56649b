# topmark:header:start
#
#   project      : REPLference
#   file         : __init__.py
#   file_relpath : src/replference/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""REPLference CLI subcommands."""
