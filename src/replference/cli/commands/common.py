# topmark:header:start
#
#   project      : REPLference
#   file         : common.py
#   file_relpath : src/replference/cli/commands/common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Argument helpers shared by the topic commands (`man`, `fun`)."""

from __future__ import annotations

import ast
from typing import Callable, ParamSpec, TypeVar

import click

from replference.cli.errors import ReplferenceUsageError
from replference.topics.base import Topic
from replference.topics.resolver import resolve_topic_by_type

P = ParamSpec("P")
R = TypeVar("R")


def subject_argument(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``TOPIC`` argument and the ``--value`` flag."""
    f = click.option(
        "--value",
        "as_value",
        is_flag=True,
        help="Treat TOPIC as a Python literal (e.g. 42, 'a', {1: 2}) and dispatch on its type.",
    )(f)
    f = click.argument("topic", metavar="TOPIC")(f)
    return f


def subject_from_cli(topic: str, *, as_value: bool) -> str | Topic:
    """Return the lookup subject: the name itself, or the topic of the literal's type.

    A string literal such as ``"'a'"`` resolves by type (to characters), not by name.

    Raises:
        ReplferenceUsageError: If ``as_value`` is set and ``topic`` is not a literal.
        UnsupportedTypeError: If the literal's type has no topic.
    """
    if not as_value:
        return topic
    try:
        value: object = ast.literal_eval(topic)
    except (ValueError, TypeError, SyntaxError, MemoryError, RecursionError) as exc:
        raise ReplferenceUsageError(f"Not a Python literal: {topic!r}") from exc
    return resolve_topic_by_type(value)
