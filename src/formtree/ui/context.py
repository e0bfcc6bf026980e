# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
Render contexts ("locals") consumed by the templates.

A locals model bundles everything a template needs for one field: the
current value, the change callback, display strings and validation flags.
Models are frozen and built fresh on every render pass.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LocalsModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="forbid",
    )


class Option(LocalsModel):
    """A selectable value with its display text."""

    value: Any
    text: str
    disabled: bool = False


class OptGroup(LocalsModel):
    """A labelled group of options inside a select."""

    label: str
    disabled: bool = False
    options: tuple[Option, ...] = ()


class Button(LocalsModel):
    label: str
    click: Callable[..., Any]  # OnClick


class ListItem(LocalsModel):
    """One row of a list: its stable key, rendered input and row buttons."""

    key: str
    input: Any  # Node
    buttons: tuple[Button, ...] = ()


class FieldLocals(LocalsModel):
    """Display and validation state shared by every field template."""

    label: str | None = None
    help: str | None = None
    error: str | None = None
    has_error: bool = False
    disabled: bool = False
    path: tuple[str | int, ...] = ()


class LeafLocals(FieldLocals):
    value: Any = None
    on_change: Callable[[Any], Any]  # OnChange
    id: str | None = None
    name: str | None = None
    attrs: dict[str, Any] = Field(default_factory=dict)

    @property
    def control_id(self) -> str | None:
        """Explicit ``id`` attribute wins over the allocated identifier."""
        return self.attrs.get("id") or self.id


class TextboxLocals(LeafLocals):
    type: str = "text"


class CheckboxLocals(LeafLocals):
    value: bool = False


class SelectLocals(LeafLocals):
    is_multiple: bool = False
    options: tuple[Option | OptGroup, ...] = ()


class RadioLocals(LeafLocals):
    options: tuple[Option, ...] = ()


class StructLocals(FieldLocals):
    order: tuple[str, ...] = ()
    inputs: dict[str, Any] = Field(default_factory=dict)  # name -> Node


class ListLocals(FieldLocals):
    items: tuple[ListItem, ...] = ()
    add: Button | None = None
