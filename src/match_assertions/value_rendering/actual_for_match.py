"""Matcher-scoped rendering of actual values."""

from __future__ import annotations

from collections.abc import Mapping

from match_assertions.deep_matching.key_lookup import MISSING, lookup_key


class _CircularReference:
    def __repr__(self) -> str:
        return "[Circular]"


_CIRCULAR = _CircularReference()


def actual_for_match(actual: object, matcher: object) -> object:
    """Return the part of ``actual`` relevant to ``matcher``.

    For mapping patterns only the keys named by the pattern and present on
    ``actual`` are kept, recursing into nested patterns, so failure output stays
    focused on what was compared. Keys are read the same way pattern matching
    reads them. A non-mapping actual with none of the pattern's keys, and any
    actual under a non-pattern matcher, is returned unchanged.
    """
    return _scope(actual, matcher, in_progress=set())


def _scope(actual: object, matcher: object, in_progress: set[tuple[int, int]]) -> object:
    if not isinstance(matcher, Mapping) or actual is None or actual is matcher:
        return actual
    pair = (id(actual), id(matcher))
    if pair in in_progress:
        return _CIRCULAR

    in_progress.add(pair)
    try:
        scoped: dict[object, object] = {}
        for key, nested_matcher in matcher.items():
            value = lookup_key(actual, key)
            if value is not MISSING:
                scoped[key] = _scope(value, nested_matcher, in_progress)
    finally:
        in_progress.discard(pair)

    if not scoped and not isinstance(actual, Mapping):
        return actual
    return scoped
