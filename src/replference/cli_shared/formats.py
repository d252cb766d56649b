# topmark:header:start
#
#   project      : REPLference
#   file         : formats.py
#   file_relpath : src/replference/cli_shared/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats for CLI rendering."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable).
      NDJSON: One JSON object per line (newline-delimited JSON; machine-readable).
      MARKDOWN: Markdown text.

    Notes:
      - Machine formats (``JSON`` and ``NDJSON``) never include ANSI color.
      - Use with `EnumChoiceParam` to parse ``--format`` from Click.
    """

    DEFAULT = "default"
    JSON = "json"
    NDJSON = "ndjson"
    MARKDOWN = "markdown"

    @property
    def is_machine(self) -> bool:
        """Whether the format is machine-readable (JSON or NDJSON)."""
        return self in (OutputFormat.JSON, OutputFormat.NDJSON)
