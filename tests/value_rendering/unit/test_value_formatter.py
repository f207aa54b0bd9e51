"""Value formatter tests."""

from __future__ import annotations

import re

from match_assertions.value_rendering import format_value


def _is_positive(value: int) -> bool:
    return value > 0


def test_top_level_strings_render_bare_and_nested_strings_quoted() -> None:
    assert format_value("hello") == "hello"
    assert format_value(["hello"]) == "['hello']"
    assert format_value({"name": "Ann"}) == "{'name': 'Ann'}"


def test_scalars_render_with_repr() -> None:
    assert format_value(3) == "3"
    assert format_value(2.5) == "2.5"
    assert format_value(True) == "True"
    assert format_value(None) == "None"


def test_containers_render_recursively() -> None:
    assert format_value([1, [2, 3]]) == "[1, [2, 3]]"
    assert format_value((1,)) == "(1,)"
    assert format_value((1, 2)) == "(1, 2)"
    assert format_value(()) == "()"
    assert format_value({}) == "{}"
    assert format_value({3}) == "{3}"
    assert format_value(set()) == "set()"
    assert format_value({"user": {"tags": ["a"]}}) == "{'user': {'tags': ['a']}}"


def test_regexes_and_callables_render_readably() -> None:
    assert format_value(re.compile(r"^\d+$")) == r"/^\d+$/"
    assert format_value(_is_positive) == "function _is_positive"
    assert format_value(lambda value: value) == "function <lambda>"
    assert format_value({"age": _is_positive}) == "{'age': function _is_positive}"


def test_classes_render_with_repr() -> None:
    assert format_value(int) == "<class 'int'>"


def test_long_containers_are_truncated() -> None:
    assert format_value([1, 2, 3, 4], limit_children_count=2) == "[1, 2, ... (2 more)]"
    assert format_value({"a": 1, "b": 2}, limit_children_count=1) == "{'a': 1, ... (1 more)}"


def test_circular_references_are_marked() -> None:
    items: list[object] = [1]
    items.append(items)
    mapping: dict[str, object] = {"a": 1}
    mapping["self"] = mapping

    assert format_value(items) == "[1, [Circular]]"
    assert format_value(mapping) == "{'a': 1, 'self': [Circular]}"


def test_repeated_non_circular_references_render_in_full() -> None:
    shared = [1]

    assert format_value([shared, shared]) == "[[1], [1]]"
