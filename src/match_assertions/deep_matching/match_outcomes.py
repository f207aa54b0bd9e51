"""Deep matching outcome entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MatchOutcomeKind(str, Enum):
    """Possible outcomes of evaluating one matcher."""

    MATCHED = "matched"
    NOT_MATCHED = "not_matched"
    INVALID_MATCHER = "invalid_matcher"


@dataclass(frozen=True)
class MatchOutcome:
    """Result of evaluating an actual value against a matcher."""

    kind: MatchOutcomeKind
    message: str | None = None

    @classmethod
    def from_bool(cls, matched: bool) -> MatchOutcome:
        return cls(kind=MatchOutcomeKind.MATCHED if matched else MatchOutcomeKind.NOT_MATCHED)

    @classmethod
    def invalid(cls, message: str) -> MatchOutcome:
        return cls(kind=MatchOutcomeKind.INVALID_MATCHER, message=message)

    @property
    def matched(self) -> bool:
        """Return True when the actual value satisfied the matcher."""
        return self.kind == MatchOutcomeKind.MATCHED

    @property
    def is_invalid(self) -> bool:
        return self.kind == MatchOutcomeKind.INVALID_MATCHER
