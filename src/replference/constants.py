# topmark:header:start
#
#   project      : REPLference
#   file         : constants.py
#   file_relpath : src/replference/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""REPLference Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

REPLFERENCE_VERSION: str = get_version("replference")

# Packages holding the bundled content resources:
MANUALS_PACKAGE: str = "replference.content.manuals"
LISTINGS_PACKAGE: str = "replference.content.listings"

MANUAL_SUFFIX: str = ".md"
LISTING_SUFFIX: str = ".toml"

# Listing rendering
LISTING_RULE_CHAR: str = "≡"
COLUMN_GAP: int = 4

# Suffix marking names that a module does not list in its ``__all__``:
NON_PUBLIC_MARKER: str = "ˣ"

LOG_LEVEL_ENV_VAR: str = "REPLFERENCE_LOG_LEVEL"
