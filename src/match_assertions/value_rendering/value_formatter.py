"""Human-readable rendering of values for assertion messages."""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable, Mapping
from itertools import islice
from typing import Any

DEFAULT_LIMIT_CHILDREN_COUNT = 250
_CIRCULAR = "[Circular]"


def format_value(value: object, *, limit_children_count: int = DEFAULT_LIMIT_CHILDREN_COUNT) -> str:
    """Render a value the way assertion messages display it.

    Top-level strings are rendered bare so messages read naturally; strings
    nested inside containers are quoted. Containers longer than
    ``limit_children_count`` are truncated with a ``... (N more)`` marker.
    """
    if isinstance(value, str):
        return value
    return _format_nested(value, limit_children_count, seen=set())


def _format_nested(value: object, limit: int, seen: set[int]) -> str:
    if isinstance(value, str):
        return repr(value)
    if isinstance(value, re.Pattern):
        return f"/{value.pattern}/"
    if isinstance(value, Mapping | list | tuple | set | frozenset):
        if id(value) in seen:
            return _CIRCULAR
        seen.add(id(value))
        try:
            return _format_container(value, limit, seen)
        finally:
            seen.discard(id(value))
    if callable(value) and not isinstance(value, type):
        return f"function {getattr(value, '__name__', type(value).__name__)}"
    return repr(value)


def _format_container(
    value: Mapping[object, object] | Collection[object], limit: int, seen: set[int]
) -> str:
    if isinstance(value, Mapping):
        entries = [
            f"{_format_nested(key, limit, seen)}: {_format_nested(item, limit, seen)}"
            for key, item in _limited(value.items(), limit)
        ]
        return "{" + _join(entries, len(value), limit) + "}"
    items = [_format_nested(item, limit, seen) for item in _limited(value, limit)]
    body = _join(items, len(value), limit)
    if isinstance(value, list):
        return f"[{body}]"
    if isinstance(value, tuple):
        return f"({body},)" if len(value) == 1 else f"({body})"
    if not value:
        return f"{type(value).__name__}()"
    return "{" + body + "}"


def _limited(items: Iterable[Any], limit: int) -> list[Any]:
    return list(islice(items, limit))


def _join(parts: list[str], total: int, limit: int) -> str:
    if total > limit:
        parts = [*parts, f"... ({total - limit} more)"]
    return ", ".join(parts)
