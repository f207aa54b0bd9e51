"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass

from match_assertions.value_rendering import DEFAULT_LIMIT_CHILDREN_COUNT

DEFAULT_EXCEPTION_MESSAGE_TEMPLATE = "${customMessage}${exceptionMessage}"


@dataclass(frozen=True)
class AssertionSettings:
    """Process-wide assertion message and rendering settings."""

    exception_message_template: str = DEFAULT_EXCEPTION_MESSAGE_TEMPLATE
    limit_children_count: int = DEFAULT_LIMIT_CHILDREN_COUNT
