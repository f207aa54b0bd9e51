"""Key lookup shared by pattern matching and pattern-scoped rendering."""

from __future__ import annotations

from collections.abc import Mapping

MISSING = object()


def lookup_key(actual: object, key: object) -> object:
    """Return the value a pattern key names on ``actual``, or ``MISSING``.

    Mappings are read by key. Any other non-None value is read by public
    attribute name, which covers plain objects, ``__slots__`` classes and scalars.
    """
    if actual is None:
        return MISSING
    if isinstance(actual, Mapping):
        return actual[key] if key in actual else MISSING
    if isinstance(key, str) and not key.startswith("_"):
        return getattr(actual, key, MISSING)
    return MISSING
