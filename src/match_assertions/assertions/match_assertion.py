"""The ``match`` assertion: deep matching wired into assert/refute."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from match_assertions.assertion_framework import (
    AssertionContext,
    AssertionDefinition,
    AssertionRegistry,
)
from match_assertions.configuration.runtime_settings import AssertionSettings
from match_assertions.deep_matching import MatchOutcome, evaluate_match
from match_assertions.value_rendering import actual_for_match, format_value

ASSERT_MESSAGE = "${customMessage}${actual} expected to match ${expected}"
REFUTE_MESSAGE = "${customMessage}${actual} expected not to match ${expected}"
EXPECTATION_NAME = "toMatch"


class MatchError(Exception):
    """Raised when a matcher is not one of the supported kinds."""


def describe_invalid_matcher(
    matcher: object, formatter: Callable[[object], str] = format_value
) -> str:
    return (
        f"Matcher ({formatter(matcher)}) was not a string, a number, a function, "
        "a boolean or an object"
    )


def evaluate(
    actual: object, matcher: object, *, formatter: Callable[[object], str] = format_value
) -> MatchOutcome:
    """Evaluate ``matcher`` against ``actual`` without raising for bad matchers."""
    outcome = evaluate_match(actual, matcher)
    if outcome.is_invalid:
        return MatchOutcome.invalid(describe_invalid_matcher(matcher, formatter))
    return outcome


def match(
    actual: object, matcher: object, *, formatter: Callable[[object], str] = format_value
) -> bool:
    """Return True when ``actual`` satisfies ``matcher``.

    Raises:
      MatchError: If ``matcher`` is not a string, number, boolean, callable,
        compiled regular expression or mapping pattern, or if evaluating it fails.
    """
    outcome = evaluate(actual, matcher, formatter=formatter)
    if outcome.is_invalid:
        raise MatchError(outcome.message)
    return outcome.matched


def match_values(actual: object, matcher: object, message: str | None) -> dict[str, object]:
    return {
        "actual": actual_for_match(actual, matcher),
        "expected": matcher,
        "customMessage": message,
    }


def register_match_assertion(
    registry: AssertionRegistry, settings: AssertionSettings | None = None
) -> None:
    """Register ``match`` on ``registry`` as ``assert_.match``/``refute.match``/``toMatch``."""
    resolved_settings = settings or registry.settings

    def _match_outcome(context: AssertionContext, actual: object, matcher: object) -> MatchOutcome:
        outcome = evaluate(actual, matcher, formatter=registry.format)
        if outcome.is_invalid:
            context.exception_message = outcome.message
        return outcome

    def _assert(context: AssertionContext, actual: object, matcher: object) -> bool:
        outcome = _match_outcome(context, actual, matcher)
        if outcome.is_invalid:
            return context.fail("exceptionMessage")
        return outcome.matched

    def _refute(context: AssertionContext, actual: object, matcher: object) -> bool:
        outcome = _match_outcome(context, actual, matcher)
        if outcome.is_invalid:
            return context.fail("exceptionMessage")
        return not outcome.matched

    registry.attach("match", partial(match, formatter=registry.format))
    registry.attach("evaluate_match", partial(evaluate, formatter=registry.format))
    registry.add(
        "match",
        AssertionDefinition(
            assert_=_assert,
            refute=_refute,
            assert_message=ASSERT_MESSAGE,
            refute_message=REFUTE_MESSAGE,
            expectation=EXPECTATION_NAME,
            values=match_values,
        ),
        message_templates={"exceptionMessage": resolved_settings.exception_message_template},
    )
