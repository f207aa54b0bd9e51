"""Assertion registry turning definitions into assert/refute entry points."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator, Mapping
from functools import partial
from typing import Any

from match_assertions.configuration.runtime_settings import AssertionSettings
from match_assertions.value_rendering import format_value

from .assertion_models import (
    DEFAULT_MESSAGE_KEY,
    AssertionContext,
    AssertionDefinition,
    AssertionDirection,
)
from .message_templates import custom_message_prefix, interpolate

_LOGGER = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")
_EVENTS = ("pass", "failure")


class AssertionFailure(AssertionError):
    """Raised when an assertion or refutation does not hold."""

    def __init__(self, message: str, *, name: str, direction: AssertionDirection) -> None:
        super().__init__(message)
        self.name = name
        self.direction = direction


class AssertionEntryPoint:
    """Callable assert or refute side of one registered assertion."""

    def __init__(
        self,
        registry: AssertionRegistry,
        name: str,
        direction: AssertionDirection,
        definition: AssertionDefinition,
        message_templates: Mapping[str, str],
    ) -> None:
        self._registry = registry
        self._definition = definition
        self.name = name
        self.direction = direction
        self.message_templates = {
            DEFAULT_MESSAGE_KEY: definition.message_for(direction),
            **message_templates,
        }

    @property
    def exception_message(self) -> str | None:
        return self.message_templates.get("exceptionMessage")

    @exception_message.setter
    def exception_message(self, template: str) -> None:
        self.message_templates["exceptionMessage"] = template

    def __call__(self, actual: object, expected: object, message: str | None = None) -> None:
        self._registry.count += 1
        context = AssertionContext(name=self.name, direction=self.direction)
        if self._definition.predicate_for(self.direction)(context, actual, expected):
            _LOGGER.debug("%s.%s passed", self.direction.value, self.name)
            self._registry.emit("pass", self.direction, self.name)
            return

        failure = AssertionFailure(
            self._render_failure(context, actual, expected, message),
            name=self.name,
            direction=self.direction,
        )
        _LOGGER.debug("%s.%s failed: %s", self.direction.value, self.name, failure)
        self._registry.emit("failure", failure)
        raise failure

    def _render_failure(
        self,
        context: AssertionContext,
        actual: object,
        expected: object,
        message: str | None,
    ) -> str:
        if self._definition.values is None:
            values: dict[str, object] = {
                "actual": actual,
                "expected": expected,
                "customMessage": message,
            }
        else:
            values = dict(self._definition.values(actual, expected, message))
        values["customMessage"] = custom_message_prefix(values.get("customMessage"))
        values.update(context.template_fields())

        template = self.message_templates.get(context.failure_key)
        if template is None:
            raise KeyError(
                f"{self.direction.value}.{self.name} has no message template "
                f"'{context.failure_key}'"
            )
        return interpolate(
            template,
            values,
            limit_children_count=self._registry.settings.limit_children_count,
        )


class AssertionNamespace:
    """Attribute-style access to the entry points of one direction."""

    def __init__(self, direction: AssertionDirection) -> None:
        self._direction = direction
        self._entries: dict[str, AssertionEntryPoint] = {}

    def register(self, entry_point: AssertionEntryPoint) -> None:
        self._entries[entry_point.name] = entry_point

    def __getattr__(self, name: str) -> AssertionEntryPoint:
        entries = self.__dict__.get("_entries", {})
        if name in entries:
            return entries[name]
        raise AttributeError(f"No assertion registered as {self._direction.value}.{name}")

    def __getitem__(self, name: str) -> AssertionEntryPoint:
        return self._entries[name]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


class Expectation:
    """Expectation-style access to registered assertions: ``expect(actual).toMatch(m)``."""

    def __init__(
        self, registry: AssertionRegistry, actual: object, *, negated: bool = False
    ) -> None:
        self._registry = registry
        self._actual = actual
        self._negated = negated

    @property
    def not_(self) -> Expectation:
        return Expectation(self._registry, self._actual, negated=not self._negated)

    def __getattr__(self, name: str) -> Callable[..., None]:
        if name.startswith("_"):
            raise AttributeError(name)
        assertion_name = self._registry.expectation_target(name)
        if assertion_name is None:
            raise AttributeError(f"No expectation registered as {name}")
        namespace = self._registry.refute if self._negated else self._registry.assert_
        return partial(namespace[assertion_name], self._actual)


class AssertionRegistry:
    """Registry of named assertions and their assert/refute entry points."""

    def __init__(self, settings: AssertionSettings | None = None) -> None:
        self.settings = settings or AssertionSettings()
        self.assert_ = AssertionNamespace(AssertionDirection.ASSERT)
        self.refute = AssertionNamespace(AssertionDirection.REFUTE)
        self.count = 0
        self._helpers: dict[str, Callable[..., Any]] = {}
        self._expectations: dict[str, str] = {}
        self._hooks: dict[str, list[Callable[..., None]]] = {event: [] for event in _EVENTS}

    def add(
        self,
        name: str,
        definition: AssertionDefinition,
        *,
        message_templates: Mapping[str, str] | None = None,
    ) -> None:
        """Register an assertion and expose it on both directions."""
        templates = dict(message_templates or {})
        for namespace, direction in (
            (self.assert_, AssertionDirection.ASSERT),
            (self.refute, AssertionDirection.REFUTE),
        ):
            namespace.register(AssertionEntryPoint(self, name, direction, definition, templates))
        if definition.expectation:
            self._expectations[definition.expectation] = name
            self._expectations[_CAMEL_BOUNDARY.sub("_", definition.expectation).lower()] = name
        _LOGGER.debug("Registered assertion %s", name)

    def attach(self, name: str, helper: Callable[..., Any]) -> None:
        """Expose a helper function on the registry, e.g. ``registry.match``."""
        self._helpers[name] = helper

    def __getattr__(self, name: str) -> Callable[..., Any]:
        helpers = self.__dict__.get("_helpers", {})
        if name in helpers:
            return helpers[name]
        raise AttributeError(f"{type(self).__name__} has no attribute {name!r}")

    def expectation_target(self, expectation: str) -> str | None:
        return self._expectations.get(expectation)

    def expect(self, actual: object) -> Expectation:
        return Expectation(self, actual)

    def format(self, value: object) -> str:
        """Render a value using the registry's rendering settings."""
        return format_value(value, limit_children_count=self.settings.limit_children_count)

    def on(self, event: str, hook: Callable[..., None]) -> None:
        """Register a listener for ``pass`` or ``failure`` events."""
        if event not in self._hooks:
            raise ValueError(f"Unknown assertion event: {event}")
        self._hooks[event].append(hook)

    def emit(self, event: str, *args: object) -> None:
        for hook in self._hooks[event]:
            hook(*args)
