"""Registered assertions."""

from __future__ import annotations

from match_assertions.assertion_framework import AssertionRegistry
from match_assertions.configuration.runtime_settings import AssertionSettings

from .match_assertion import (
    ASSERT_MESSAGE,
    EXPECTATION_NAME,
    REFUTE_MESSAGE,
    MatchError,
    describe_invalid_matcher,
    evaluate,
    match,
    match_values,
    register_match_assertion,
)


def create_assertions(settings: AssertionSettings | None = None) -> AssertionRegistry:
    """Build a registry with every bundled assertion registered."""
    registry = AssertionRegistry(settings)
    register_match_assertion(registry)
    return registry


__all__ = [
    "ASSERT_MESSAGE",
    "REFUTE_MESSAGE",
    "EXPECTATION_NAME",
    "MatchError",
    "create_assertions",
    "describe_invalid_matcher",
    "evaluate",
    "match",
    "match_values",
    "register_match_assertion",
]
