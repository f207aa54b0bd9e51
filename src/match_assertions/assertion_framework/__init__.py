"""Assertion framework exports."""

from .assertion_models import (
    DEFAULT_MESSAGE_KEY,
    AssertionContext,
    AssertionDefinition,
    AssertionDirection,
)
from .assertion_registry import (
    AssertionEntryPoint,
    AssertionFailure,
    AssertionNamespace,
    AssertionRegistry,
    Expectation,
)
from .message_templates import custom_message_prefix, interpolate

__all__ = [
    "DEFAULT_MESSAGE_KEY",
    "AssertionContext",
    "AssertionDefinition",
    "AssertionDirection",
    "AssertionEntryPoint",
    "AssertionFailure",
    "AssertionNamespace",
    "AssertionRegistry",
    "Expectation",
    "custom_message_prefix",
    "interpolate",
]
