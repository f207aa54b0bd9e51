"""Failure message templating."""

from __future__ import annotations

from collections.abc import Mapping
from string import Template

from match_assertions.value_rendering import DEFAULT_LIMIT_CHILDREN_COUNT, format_value

_TERMINAL_PUNCTUATION = (".", ":", "!", "?")


def custom_message_prefix(message: object) -> str:
    """Turn a user supplied message into the prefix placed before failure text."""
    if message is None:
        return ""
    text = str(message)
    if not text:
        return ""
    if text.endswith(_TERMINAL_PUNCTUATION):
        return f"{text} "
    return f"{text}: "


def interpolate(
    template: str,
    values: Mapping[str, object],
    *,
    limit_children_count: int = DEFAULT_LIMIT_CHILDREN_COUNT,
) -> str:
    """Substitute ``${name}`` placeholders with formatted values.

    Unknown placeholders are left in place.
    """
    formatted = {
        key: format_value(value, limit_children_count=limit_children_count)
        for key, value in values.items()
    }
    return Template(template).safe_substitute(formatted)
