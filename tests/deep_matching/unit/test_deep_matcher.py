"""Deep matcher tests."""

from __future__ import annotations

import re
from dataclasses import dataclass

import pytest
from match_assertions.deep_matching import (
    InvalidMatcherError,
    MatchOutcomeKind,
    deep_match,
    evaluate_match,
)


@dataclass
class _Person:
    name: str
    age: int


def test_literal_matchers_use_strict_equality() -> None:
    assert deep_match(3, 3) is True
    assert deep_match(3, 4) is False
    assert deep_match(3, 3.0) is True
    assert deep_match("hello", "hello") is True
    assert deep_match("hello", "ell") is False
    assert deep_match("3", 3) is False
    assert deep_match(3, "3") is False


def test_booleans_only_equal_booleans() -> None:
    assert deep_match(True, True) is True
    assert deep_match(False, True) is False
    assert deep_match(1, True) is False
    assert deep_match(True, 1) is False
    assert deep_match(0, False) is False


def test_regex_matchers_search_text() -> None:
    assert deep_match("hello", re.compile("ell")) is True
    assert deep_match("hello", re.compile("^ell")) is False
    assert deep_match(12345, re.compile(r"^\d+$")) is True
    assert deep_match(None, re.compile(".*")) is False


def test_predicate_matchers_use_truthiness_of_result() -> None:
    assert deep_match(5, lambda value: value > 0) is True
    assert deep_match(-5, lambda value: value > 0) is False
    assert deep_match("x", lambda value: "non-empty") is True
    assert deep_match("x", lambda value: None) is False


def test_pattern_matches_subset_of_mapping() -> None:
    assert deep_match({"a": 1, "b": 2}, {"a": 1}) is True
    assert deep_match({"a": 1, "b": 2}, {"a": 2}) is False
    assert deep_match({"a": 1}, {"b": 1}) is False
    assert deep_match({"a": 1}, {}) is True


def test_pattern_recurses_into_nested_matchers() -> None:
    actual = {"user": {"name": "Ann", "age": 30, "tags": ["admin"]}, "active": True}
    pattern = {
        "user": {"name": re.compile("^A"), "age": lambda age: age >= 18},
        "active": True,
    }

    assert deep_match(actual, pattern) is True
    assert deep_match(actual, {"user": {"name": "Bob"}}) is False


def test_pattern_reads_attributes_of_plain_objects() -> None:
    person = _Person(name="Ann", age=30)

    assert deep_match(person, {"name": "Ann"}) is True
    assert deep_match(person, {"name": "Ann", "age": 31}) is False
    assert deep_match(person, {"email": "ann@example.com"}) is False
    assert deep_match(person, {"__class__": _Person}) is False


def test_pattern_does_not_match_none_or_scalars() -> None:
    assert deep_match(None, {"a": 1}) is False
    assert deep_match(3, {"real": 3}) is True
    assert deep_match("text", {"a": 1}) is False


@pytest.mark.parametrize("matcher", [None, [1, 2], (1,), {1, 2}, b"bytes", object()])
def test_unsupported_matchers_raise(matcher: object) -> None:
    with pytest.raises(InvalidMatcherError) as exc_info:
        deep_match("anything", matcher)

    assert exc_info.value.matcher is matcher


def test_unsupported_matcher_nested_in_pattern_raises_even_when_key_is_missing() -> None:
    with pytest.raises(InvalidMatcherError):
        deep_match({}, {"a": None})


def test_evaluate_match_reports_outcome_kinds() -> None:
    assert evaluate_match(3, 3).kind == MatchOutcomeKind.MATCHED
    assert evaluate_match(3, 4).kind == MatchOutcomeKind.NOT_MATCHED

    invalid = evaluate_match(3, None)
    assert invalid.kind == MatchOutcomeKind.INVALID_MATCHER
    assert invalid.is_invalid
    assert invalid.matched is False
    assert invalid.message


def test_evaluate_match_reports_raising_predicate_as_invalid() -> None:
    outcome = evaluate_match(3, lambda value: 1 / 0)

    assert outcome.is_invalid
    assert "division by zero" in (outcome.message or "")


def test_repeated_evaluation_is_stable() -> None:
    actual = {"a": 1, "b": [1, 2]}
    pattern = {"a": 1}

    results = {deep_match(actual, pattern) for _ in range(5)}

    assert results == {True}
    assert actual == {"a": 1, "b": [1, 2]}
    assert pattern == {"a": 1}


def test_self_referential_patterns_terminate() -> None:
    pattern: dict[str, object] = {"x": 1}
    pattern["self"] = pattern
    matching: dict[str, object] = {"x": 1}
    matching["self"] = matching
    differing: dict[str, object] = {"x": 2}
    differing["self"] = differing

    assert deep_match(matching, pattern) is True
    assert deep_match(differing, pattern) is False


def test_mutually_referencing_patterns_validate() -> None:
    inner: dict[str, object] = {"x": 1}
    outer: dict[str, object] = {"inner": inner}
    inner["outer"] = outer

    assert deep_match({"inner": {"x": 2}}, outer) is False
