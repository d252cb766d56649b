# topmark:header:start
#
#   project      : REPLference
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the REPLference test suite.

Sets up typed pytest helpers, TRACE-level logging for test runs, and fixtures
that capture console output.
"""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO
from typing import Any, TypeVar, cast

import pytest

from replference.cli_shared.console import ClickConsole
from replference.config import logging
from replference.constants import LOG_LEVEL_ENV_VAR

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.slow)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_replference_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    This avoids DEBUG/TRACE noise when the developer has exported
    REPLFERENCE_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


class Captured:
    """A plain console together with the buffer it writes to."""

    def __init__(self) -> None:
        self.out = StringIO()
        self.err = StringIO()
        self.console = ClickConsole(enable_color=False, out=self.out, err=self.err)

    @property
    def text(self) -> str:
        """Everything written to stdout so far."""
        return self.out.getvalue()

    @property
    def lines(self) -> list[str]:
        """Stdout split into lines."""
        return self.text.splitlines()


@pytest.fixture
def captured() -> Captured:
    """Return a plain-text console writing into memory."""
    return Captured()


@pytest.fixture
def color_console() -> tuple[ClickConsole, StringIO]:
    """Return a color-enabled Click console writing into memory."""
    buffer = StringIO()
    return ClickConsole(enable_color=True, out=buffer, err=buffer), buffer
