# topmark:header:start
#
#   project      : REPLference
#   file         : __init__.py
#   file_relpath : src/replference/content/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bundled reference content.

Sub-packages:
    manuals: one Markdown manual per topic (``<topic>.md``).
    listings: one TOML listing document per topic (``<topic>.toml``).

These packages hold data only; they are importable so that
``importlib.resources.files`` can address them.
"""
