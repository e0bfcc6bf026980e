"""Tests for enumeration option extraction."""

from __future__ import annotations

import pytest

from formtree.schema import Enumeration, Primitive, SchemaError, get_options_of_enum
from formtree.ui.context import Option


def test_options_follow_mapping_order() -> None:
    options = get_options_of_enum(Enumeration({"a": "Alpha feature", "b": "Beta"}))

    assert options == [
        Option(value="a", text="Alpha feature"),
        Option(value="b", text="Beta"),
    ]


def test_insertion_order_is_kept_for_unsorted_keys() -> None:
    options = get_options_of_enum(Enumeration({"z": "Zed", "a": "Ay", "m": "Em"}))
    assert [o.value for o in options] == ["z", "a", "m"]


def test_enumeration_of_values() -> None:
    options = get_options_of_enum(Enumeration.of("red green"))
    assert [(o.value, o.text) for o in options] == [
        ("red", "red"),
        ("green", "green"),
    ]


def test_options_are_enabled() -> None:
    options = get_options_of_enum(Enumeration({"a": "A"}))
    assert options[0].disabled is False


def test_non_enumeration_raises() -> None:
    with pytest.raises(SchemaError):
        get_options_of_enum(Primitive("Str"))


def test_unknown_kind_raises_schema_error() -> None:
    class Odd:
        kind = "set"
        mapping = {"a": "A"}

    with pytest.raises(SchemaError):
        get_options_of_enum(Odd())
