"""Assertion framework entities."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum

DEFAULT_MESSAGE_KEY = "message"


class AssertionDirection(str, Enum):
    """Direction in which a registered assertion is evaluated."""

    ASSERT = "assert"
    REFUTE = "refute"


@dataclass
class AssertionContext:
    """Mutable per-call state handed to an assertion predicate."""

    name: str
    direction: AssertionDirection
    failure_key: str = DEFAULT_MESSAGE_KEY
    exception_message: str | None = None

    def fail(self, message_key: str) -> bool:
        """Mark the call as failed and pick the message template to report."""
        self.failure_key = message_key
        return False

    def template_fields(self) -> dict[str, object]:
        if self.exception_message is None:
            return {}
        return {"exceptionMessage": self.exception_message}


AssertionPredicate = Callable[[AssertionContext, object, object], bool]
ValuesFactory = Callable[[object, object, str | None], Mapping[str, object]]


@dataclass(frozen=True)
class AssertionDefinition:
    """Named assertion registered with an assertion registry."""

    assert_: AssertionPredicate
    refute: AssertionPredicate
    assert_message: str
    refute_message: str
    expectation: str | None = None
    values: ValuesFactory | None = None

    def predicate_for(self, direction: AssertionDirection) -> AssertionPredicate:
        return self.assert_ if direction == AssertionDirection.ASSERT else self.refute

    def message_for(self, direction: AssertionDirection) -> str:
        if direction == AssertionDirection.ASSERT:
            return self.assert_message
        return self.refute_message
