# topmark:header:start
#
#   project      : REPLference
#   file         : test_resolver_properties.py
#   file_relpath : tests/topics/test_resolver_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property-based tests for the name resolver."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from replference.topics import Topic, resolve_topic_by_name
from tests.conftest import mark_hypothesis_slow
from tests.strategies_replference import topic_names, unmatched_names


@given(topic_names())
def test_alias_with_any_case_and_suffix_resolves(case: tuple[Topic, str]) -> None:
    """A topic alias in any letter case, followed by anything, selects the topic."""
    expected, name = case
    assert resolve_topic_by_name(name) is expected


@given(unmatched_names())
def test_digit_prefixed_names_never_resolve(name: str) -> None:
    assert resolve_topic_by_name(name) is None


@given(st.text(max_size=30))
def test_resolution_is_deterministic(name: str) -> None:
    assert resolve_topic_by_name(name) is resolve_topic_by_name(name)


@mark_hypothesis_slow
@settings(max_examples=2000)
@given(st.text(max_size=60))
def test_resolver_never_raises_on_arbitrary_text(name: str) -> None:
    result = resolve_topic_by_name(name)
    assert result is None or isinstance(result, Topic)
