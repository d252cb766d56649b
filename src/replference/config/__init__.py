# topmark:header:start
#
#   project      : REPLference
#   file         : __init__.py
#   file_relpath : src/replference/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for REPLference.

REPLference reads no configuration files. The only runtime knobs are CLI flags
and a handful of environment variables (``REPLFERENCE_LOG_LEVEL``,
``NO_COLOR``, ``FORCE_COLOR``); this package hosts the logging setup driven by
them.
"""

from __future__ import annotations
