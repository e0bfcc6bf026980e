"""Tests for label humanization."""

from __future__ import annotations

import pytest

from formtree.ui.humanize import capitalize, humanize, underscored


@pytest.mark.parametrize(
    ("name", "label"),
    [
        ("user_id", "User"),
        ("firstName", "First name"),
        ("  already-set ", "Already set"),
        ("name", "Name"),
        ("postalCode2", "Postal code2"),
        ("HTMLParser", "Htmlparser"),
        ("user_identifier", "User identifier"),
        ("multi - - dash", "Multi dash"),
        ("", ""),
    ],
)
def test_humanize(name: str, label: str) -> None:
    assert humanize(name) == label


def test_only_trailing_id_is_stripped() -> None:
    assert humanize("id_card") == "Id card"


def test_underscored_splits_camel_case_runs() -> None:
    assert underscored("myURLValue") == "my_urlvalue"


def test_capitalize_leaves_rest_unchanged() -> None:
    assert capitalize("hello World") == "Hello World"
    assert capitalize("") == ""
