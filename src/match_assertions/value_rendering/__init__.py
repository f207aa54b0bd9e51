"""Value rendering exports."""

from .actual_for_match import actual_for_match
from .value_formatter import DEFAULT_LIMIT_CHILDREN_COUNT, format_value

__all__ = [
    "DEFAULT_LIMIT_CHILDREN_COUNT",
    "actual_for_match",
    "format_value",
]
