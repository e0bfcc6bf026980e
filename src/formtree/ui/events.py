# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
Callback and event contracts shared by templates and the presentation layer.

Templates attach handlers to nodes under an event name ("change", "click").
The presentation layer calls them with an event object exposing ``target``;
handlers translate the event into a plain value and forward it to the
caller's OnChange callback.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)


class OnChange(Protocol[T_contra]):
    """Receives the new value of a field."""

    def __call__(self, value: T_contra, /) -> Any: ...


class OnClick(Protocol):
    """Receives the click event, if the presentation layer supplies one."""

    def __call__(self, event: Any = None, /) -> Any: ...


class SelectOptionState(Protocol):
    value: Any
    selected: bool


class EventTarget(Protocol):
    """The control an event was dispatched on."""

    value: Any
    checked: bool
    files: Sequence[Any]
    options: Sequence[SelectOptionState]


class ChangeEvent(Protocol):
    target: EventTarget


@runtime_checkable
class Clickable(Protocol):
    def click(self) -> None: ...


@runtime_checkable
class ElementLookup(Protocol):
    """Presentation-side lookup of rendered controls by id."""

    def get_element_by_id(self, element_id: str) -> Clickable | None: ...
