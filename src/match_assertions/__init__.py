"""Deep ``match`` assertions with assert/refute/expect entry points."""

import logging

from .assertion_framework import AssertionFailure, AssertionRegistry
from .assertions import MatchError, create_assertions, evaluate, match
from .configuration import AssertionSettings, load_configuration

logging.getLogger(__name__).addHandler(logging.NullHandler())

default_assertions = create_assertions()
assert_ = default_assertions.assert_
refute = default_assertions.refute
expect = default_assertions.expect

__all__ = [
    "AssertionFailure",
    "AssertionRegistry",
    "AssertionSettings",
    "MatchError",
    "assert_",
    "default_assertions",
    "create_assertions",
    "evaluate",
    "expect",
    "load_configuration",
    "match",
    "refute",
]
