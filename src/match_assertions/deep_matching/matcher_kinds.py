"""Matcher kind modeling for deep matching."""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum


class InvalidMatcherError(Exception):
    """Raised when a matcher is not one of the supported kinds."""

    def __init__(self, matcher: object) -> None:
        super().__init__(f"Unsupported matcher of type {type(matcher).__name__}")
        self.matcher = matcher


class MatcherKind(str, Enum):
    """Supported matcher kinds."""

    LITERAL = "literal"
    REGEX = "regex"
    PREDICATE = "predicate"
    PATTERN = "pattern"


def classify_matcher(matcher: object) -> MatcherKind:
    """Resolve the kind of a raw matcher value."""
    if isinstance(matcher, str | bool | int | float):
        return MatcherKind.LITERAL
    if isinstance(matcher, re.Pattern):
        return MatcherKind.REGEX
    if isinstance(matcher, Mapping):
        return MatcherKind.PATTERN
    if callable(matcher):
        return MatcherKind.PREDICATE
    raise InvalidMatcherError(matcher)
