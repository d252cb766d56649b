# topmark:header:start
#
#   project      : REPLference
#   file         : errors.py
#   file_relpath : src/replference/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the REPLference library.

Usage:
    Library code raises these exceptions; the CLI translates them into
    [`replference.cli.errors`][replference.cli.errors] exceptions which carry
    exit codes.

Notes:
    Name-based topic lookup never raises: an unknown topic name resolves to
    ``None``. Only value-based lookup and content loading raise.
"""

from __future__ import annotations


class ReplferenceError(Exception):
    """Base class for all REPLference library errors."""


class UnsupportedTypeError(ReplferenceError, TypeError):
    """Raised when a value belongs to none of the registered type categories.

    Attributes:
        obj_type (type): The type of the offending value.
    """

    def __init__(self, obj: object) -> None:
        self.obj_type: type = type(obj)
        super().__init__(
            f"No reference topic for values of type "
            f"'{self.obj_type.__module__}.{self.obj_type.__qualname__}'"
        )


class ContentError(ReplferenceError):
    """Raised when a bundled manual or listing resource is missing or malformed.

    Attributes:
        resource (str): Name of the offending resource (e.g. ``"dicts.toml"``).
    """

    def __init__(self, resource: str, message: str) -> None:
        self.resource: str = resource
        super().__init__(f"{resource}: {message}")
