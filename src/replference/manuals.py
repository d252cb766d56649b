# topmark:header:start
#
#   project      : REPLference
#   file         : manuals.py
#   file_relpath : src/replference/manuals.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load topic manuals from the bundled Markdown resources.

Each topic has one resource ``replference/content/manuals/<topic>.md``. Manuals
are loaded once and cached for the lifetime of the process.
"""

from __future__ import annotations

from functools import lru_cache
from importlib.resources import files
from typing import TYPE_CHECKING

from replference.config.logging import ReplferenceLogger, get_logger
from replference.constants import MANUAL_SUFFIX, MANUALS_PACKAGE
from replference.errors import ContentError

if TYPE_CHECKING:
    from replference.topics.base import Topic

logger: ReplferenceLogger = get_logger(__name__)


@lru_cache(maxsize=None)
def get_manual(topic: Topic) -> str:
    """Return (and cache) the Markdown manual of ``topic``.

    Args:
        topic (Topic): The topic to load.

    Returns:
        str: The manual text, with a single trailing newline.

    Raises:
        ContentError: If the bundled resource is missing, unreadable or empty.
    """
    resource: str = f"{topic.value}{MANUAL_SUFFIX}"
    try:
        text: str = files(MANUALS_PACKAGE).joinpath(resource).read_text(encoding="utf-8")
    except OSError as exc:
        raise ContentError(resource, f"cannot read bundled manual: {exc}") from exc

    if not text.strip():
        raise ContentError(resource, "manual is empty")

    logger.debug("Loaded manual %s (%d characters)", resource, len(text))
    return text.rstrip("\n") + "\n"
