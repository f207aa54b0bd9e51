"""Deep matching domain exports."""

from .deep_matcher import deep_match, evaluate_match
from .key_lookup import MISSING, lookup_key
from .match_outcomes import MatchOutcome, MatchOutcomeKind
from .matcher_kinds import InvalidMatcherError, MatcherKind, classify_matcher

__all__ = [
    "MatcherKind",
    "MatchOutcome",
    "MatchOutcomeKind",
    "InvalidMatcherError",
    "classify_matcher",
    "deep_match",
    "evaluate_match",
    "MISSING",
    "lookup_key",
]
