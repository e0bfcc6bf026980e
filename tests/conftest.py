"""Top-level pytest configuration for formtree."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from formtree.config import FormtreeSettings
from formtree.ui.ids import IdAllocator, default_allocator


class FakeElement:
    def __init__(self) -> None:
        self.clicks = 0

    def click(self) -> None:
        self.clicks += 1


class FakeDocument:
    """Presentation-side lookup that creates elements on demand."""

    def __init__(self) -> None:
        self.elements: dict[str, FakeElement] = {}

    def get_element_by_id(self, element_id: str) -> FakeElement:
        return self.elements.setdefault(element_id, FakeElement())


def change_event(**target: Any) -> SimpleNamespace:
    """Build an event object shaped like the ones the presentation layer sends."""
    return SimpleNamespace(target=SimpleNamespace(**target))


@pytest.fixture(autouse=True)
def reset_default_allocator():
    default_allocator.reset()
    yield
    default_allocator.reset()


@pytest.fixture
def allocator() -> IdAllocator:
    return IdAllocator("f")


@pytest.fixture
def settings() -> FormtreeSettings:
    return FormtreeSettings()


@pytest.fixture
def document() -> FakeDocument:
    return FakeDocument()


@pytest.fixture
def recorder() -> list[Any]:
    return []


@pytest.fixture
def make_event():
    return change_event
