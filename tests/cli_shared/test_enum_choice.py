# topmark:header:start
#
#   project      : REPLference
#   file         : test_enum_choice.py
#   file_relpath : tests/cli_shared/test_enum_choice.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the case-insensitive Enum Click parameter."""

from __future__ import annotations

import click
import pytest

from replference.cli.cli_types import EnumChoiceParam
from replference.cli_shared.formats import OutputFormat


def test_convert_is_case_insensitive() -> None:
    param = EnumChoiceParam(OutputFormat)
    assert param.convert("JSON", None, None) is OutputFormat.JSON
    assert param.convert(OutputFormat.NDJSON, None, None) is OutputFormat.NDJSON
    assert param.convert(None, None, None) is None


def test_member_subset_rejects_others() -> None:
    param = EnumChoiceParam(OutputFormat, members=[OutputFormat.DEFAULT, OutputFormat.MARKDOWN])
    assert param.choices == ["default", "markdown"]
    with pytest.raises(click.BadParameter, match="default, markdown"):
        param.convert("json", None, None)
