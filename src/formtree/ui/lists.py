# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
List row bookkeeping.

``move`` is the reorder primitive. ListRowController keeps one stable key
per row next to the list value, so a reordered or removed row keeps its
identity in the presentation layer, and decides which buttons a row gets.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any, TypeVar

from formtree.config import FormtreeSettings
from formtree.logging import get_logger
from formtree.ui.context import Button, ListItem
from formtree.ui.errors import LIST_KEYS_MISMATCH, ListError, ReorderIndexError
from formtree.ui.events import OnChange
from formtree.ui.ids import IdAllocator, default_allocator

logger = get_logger(__name__)

S = TypeVar("S", bound=MutableSequence[Any])


def move(seq: S, from_index: int, to_index: int) -> S:
    """Move the element at ``from_index`` to ``to_index`` in place.

    Args:
        seq: Mutable sequence to reorder
        from_index: Position of the element to move
        to_index: Position the element ends up at

    Returns:
        The same sequence, reordered

    Raises:
        ReorderIndexError: If either index is outside ``0 <= i < len(seq)``
    """
    size = len(seq)
    for label, index in (("from_index", from_index), ("to_index", to_index)):
        if not 0 <= index < size:
            raise ReorderIndexError(
                f"{label} {index} out of range for sequence of length {size}",
                index=index,
                length=size,
            )
    element = seq.pop(from_index)
    seq.insert(to_index, element)
    return seq


class ListRowController:
    """Keys, buttons and mutations for the rows of one list field.

    ``keys`` is shared with the caller: the controller updates it in place so
    the same keys can be handed back on the next render pass.
    """

    def __init__(
        self,
        value: Sequence[Any] | None,
        on_change: OnChange[list[Any]],
        *,
        keys: list[str] | None = None,
        allocator: IdAllocator | None = None,
        settings: FormtreeSettings | None = None,
        disabled: bool = False,
    ) -> None:
        self.value = list(value or [])
        self.on_change = on_change
        self.allocator = allocator or default_allocator
        self.settings = settings or FormtreeSettings.load()
        self.disabled = disabled
        if keys is None:
            keys = [self.allocator.next_id() for _ in self.value]
        elif len(keys) != len(self.value):
            raise ListError(
                "Row keys do not match the number of list elements",
                code=LIST_KEYS_MISMATCH,
                keys=len(keys),
                elements=len(self.value),
            )
        self.keys = keys

    def _commit(self, value: list[Any]) -> None:
        self.value = value
        self.on_change(list(value))

    def set(self, index: int, element: Any) -> None:
        value = list(self.value)
        value[index] = element
        self._commit(value)

    def add(self, element: Any = None) -> None:
        self.keys.append(self.allocator.next_id())
        self._commit([*self.value, element])

    def remove(self, index: int) -> None:
        if not 0 <= index < len(self.value):
            raise ReorderIndexError(
                f"Cannot remove row {index} of {len(self.value)}", index=index
            )
        del self.keys[index]
        value = list(self.value)
        del value[index]
        self._commit(value)

    def move_up(self, index: int) -> None:
        self._move(index, index - 1)

    def move_down(self, index: int) -> None:
        self._move(index, index + 1)

    def _move(self, from_index: int, to_index: int) -> None:
        value = move(list(self.value), from_index, to_index)
        move(self.keys, from_index, to_index)
        logger.debug("List row moved", from_index=from_index, to_index=to_index)
        self._commit(value)

    def buttons(self, index: int) -> tuple[Button, ...]:
        """Remove on every row, up unless first, down unless last."""
        if self.disabled:
            return ()
        buttons = [
            Button(
                label=self.settings.remove_label,
                click=lambda event=None: self.remove(index),
            )
        ]
        if index > 0:
            buttons.append(
                Button(
                    label=self.settings.up_label,
                    click=lambda event=None: self.move_up(index),
                )
            )
        if index < len(self.value) - 1:
            buttons.append(
                Button(
                    label=self.settings.down_label,
                    click=lambda event=None: self.move_down(index),
                )
            )
        return tuple(buttons)

    def items(self, inputs: Sequence[Any]) -> tuple[ListItem, ...]:
        """Pair each rendered row input with its key and buttons."""
        if len(inputs) != len(self.keys):
            raise ListError(
                "Rendered inputs do not match the number of rows",
                code=LIST_KEYS_MISMATCH,
                inputs=len(inputs),
                keys=len(self.keys),
            )
        return tuple(
            ListItem(key=key, input=node, buttons=self.buttons(i))
            for i, (key, node) in enumerate(zip(self.keys, inputs))
        )

    def add_button(self) -> Button | None:
        if self.disabled:
            return None
        return Button(
            label=self.settings.add_label, click=lambda event=None: self.add()
        )
