"""Deep matching of actual values against matcher values."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping

from .key_lookup import MISSING, lookup_key
from .match_outcomes import MatchOutcome
from .matcher_kinds import MatcherKind, classify_matcher

_LOGGER = logging.getLogger(__name__)


def deep_match(actual: object, matcher: object) -> bool:
    """Return True when ``actual`` satisfies ``matcher``.

    Literal matchers compare by strict equality, regular expressions are searched
    in the textual form of ``actual``, predicates are called with ``actual`` and
    mapping patterns are compared recursively as a subset of ``actual``.

    Raises:
      InvalidMatcherError: If ``matcher`` or any value nested in a pattern is not
        a supported matcher kind.
    """
    _validate_matcher(matcher, seen=set())
    return _matches(actual, matcher, in_progress=set())


def evaluate_match(actual: object, matcher: object) -> MatchOutcome:
    """Evaluate a matcher and return the outcome instead of raising."""
    try:
        matched = deep_match(actual, matcher)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        # Predicates may raise anything; every failure is reported as an invalid matcher.
        _LOGGER.debug("Matcher evaluation failed: %s", exc)
        return MatchOutcome.invalid(str(exc))
    return MatchOutcome.from_bool(matched)


def _validate_matcher(matcher: object, seen: set[int]) -> None:
    if classify_matcher(matcher) != MatcherKind.PATTERN or id(matcher) in seen:
        return
    seen.add(id(matcher))
    for nested_matcher in matcher.values():  # type: ignore[attr-defined]
        _validate_matcher(nested_matcher, seen)


def _matches(actual: object, matcher: object, in_progress: set[tuple[int, int]]) -> bool:
    kind = classify_matcher(matcher)
    if kind == MatcherKind.LITERAL:
        return _literal_equals(actual, matcher)
    if kind == MatcherKind.REGEX:
        return _regex_matches(actual, matcher)  # type: ignore[arg-type]
    if kind == MatcherKind.PREDICATE:
        return _predicate_holds(actual, matcher)  # type: ignore[arg-type]
    return _pattern_matches(actual, matcher, in_progress)  # type: ignore[arg-type]


def _literal_equals(actual: object, expected: object) -> bool:
    if isinstance(expected, bool) or isinstance(actual, bool):
        return isinstance(actual, bool) and isinstance(expected, bool) and actual is expected
    if isinstance(expected, str):
        return isinstance(actual, str) and actual == expected
    if not isinstance(actual, int | float):
        return False
    return actual == expected


def _regex_matches(actual: object, pattern: re.Pattern[str]) -> bool:
    if actual is None:
        return False
    text = actual if isinstance(actual, str) else str(actual)
    return pattern.search(text) is not None


def _predicate_holds(actual: object, predicate: Callable[[object], object]) -> bool:
    return bool(predicate(actual))


def _pattern_matches(
    actual: object, pattern: Mapping[object, object], in_progress: set[tuple[int, int]]
) -> bool:
    pair = (id(actual), id(pattern))
    # A pair already being compared further up holds unless another key disproves it.
    if actual is pattern or pair in in_progress:
        return True
    in_progress.add(pair)
    try:
        for key, nested_matcher in pattern.items():
            value = lookup_key(actual, key)
            if value is MISSING or not _matches(value, nested_matcher, in_progress):
                return False
        return True
    finally:
        in_progress.discard(pair)
