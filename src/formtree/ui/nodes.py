# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
Abstract UI node tree.

Templates produce a closed union of three node types which an external
presentation renderer turns into real widgets or markup:

- LeafNode: a control without children (``input``)
- TextNode: literal text content
- ContainerNode: a tagged node with ordered children

Attribute values are limited to scalars, ClassNames (an ordered set of
class flags) and Style (a mapping of style properties).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Union

Scalar = Union[str, int, float, bool, None]


class ClassNames:
    """Ordered set of CSS-style class flags.

    Accepts a whitespace separated string, an iterable of names, or a mapping
    of name to flag where only truthy flags are kept.
    """

    __slots__ = ("_names",)

    def __init__(
        self, flags: str | Iterable[str] | Mapping[str, Any] | ClassNames | None = None
    ) -> None:
        names: list[str] = []
        if flags is None:
            pass
        elif isinstance(flags, ClassNames):
            names = list(flags._names)
        elif isinstance(flags, str):
            names = flags.split()
        elif isinstance(flags, Mapping):
            names = [name for name, on in flags.items() if on]
        else:
            names = list(flags)
        self._names: tuple[str, ...] = tuple(dict.fromkeys(names))

    def with_flags(self, *names: str) -> ClassNames:
        """Return a copy with the given flags added."""
        return ClassNames(self._names + names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ClassNames):
            return set(self._names) == set(other._names)
        if isinstance(other, (set, frozenset)):
            return set(self._names) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._names))

    def __str__(self) -> str:
        return " ".join(self._names)

    def __repr__(self) -> str:
        return f"ClassNames({str(self)!r})"


class Style(Mapping[str, Scalar]):
    """Immutable mapping of style property to value."""

    __slots__ = ("_props",)

    def __init__(self, props: Mapping[str, Scalar] | None = None, **kwargs: Scalar):
        self._props: dict[str, Scalar] = {**(props or {}), **kwargs}

    def __getitem__(self, key: str) -> Scalar:
        return self._props[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._props)

    def __len__(self) -> int:
        return len(self._props)

    def __hash__(self) -> int:
        return hash(frozenset(self._props.items()))

    def __repr__(self) -> str:
        return f"Style({self._props!r})"


AttrValue = Union[Scalar, ClassNames, Style]
EventHandler = Callable[..., Any]


def _check_attrs(attrs: Mapping[str, Any]) -> dict[str, AttrValue]:
    checked: dict[str, AttrValue] = {}
    for name, value in attrs.items():
        if value is not None and not isinstance(
            value, (str, int, float, bool, ClassNames, Style)
        ):
            raise TypeError(
                f"Attribute '{name}' has unsupported type {type(value).__name__}"
            )
        checked[name] = value
    return checked


@dataclass(frozen=True)
class TextNode:
    text: str

    def iter_nodes(self) -> Iterator[Node]:
        yield self


@dataclass(frozen=True)
class LeafNode:
    tag: str
    attrs: dict[str, AttrValue] = field(default_factory=dict)
    events: dict[str, EventHandler] = field(default_factory=dict)
    key: Scalar = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "attrs", _check_attrs(self.attrs))

    @property
    def classes(self) -> ClassNames:
        value = self.attrs.get("class")
        return value if isinstance(value, ClassNames) else ClassNames()

    def iter_nodes(self) -> Iterator[Node]:
        yield self

    def with_attrs(self, **attrs: AttrValue) -> LeafNode:
        return replace(self, attrs={**self.attrs, **attrs})


@dataclass(frozen=True)
class ContainerNode:
    tag: str
    attrs: dict[str, AttrValue] = field(default_factory=dict)
    children: tuple[Node, ...] = ()
    events: dict[str, EventHandler] = field(default_factory=dict)
    key: Scalar = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "attrs", _check_attrs(self.attrs))
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def classes(self) -> ClassNames:
        value = self.attrs.get("class")
        return value if isinstance(value, ClassNames) else ClassNames()

    @property
    def text(self) -> str:
        """Concatenated text of the direct TextNode children."""
        return "".join(c.text for c in self.children if isinstance(c, TextNode))

    def iter_nodes(self) -> Iterator[Node]:
        """Depth-first, document-order walk including this node."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def find_all(self, tag: str) -> list[Node]:
        return [n for n in self.iter_nodes() if getattr(n, "tag", None) == tag]

    def find(self, tag: str) -> Node | None:
        found = self.find_all(tag)
        return found[0] if found else None

    def with_attrs(self, **attrs: AttrValue) -> ContainerNode:
        return replace(self, attrs={**self.attrs, **attrs})


Node = Union[LeafNode, TextNode, ContainerNode]
Children = Union[Node, str, Iterable[Union[Node, str, None]], None]


def _normalize_children(children: Children) -> tuple[Node, ...]:
    if isinstance(children, str):
        return (TextNode(children),)
    if isinstance(children, (LeafNode, TextNode, ContainerNode)):
        return (children,)
    normalized: list[Node] = []
    for child in children or ():
        if child is None:
            continue
        normalized.append(TextNode(child) if isinstance(child, str) else child)
    return tuple(normalized)


def element(
    tag: str,
    attrs: Mapping[str, Any] | None = None,
    children: Children = None,
    events: Mapping[str, EventHandler] | None = None,
    key: Scalar = None,
) -> LeafNode | ContainerNode:
    """Build a node, normalising children and dropping None-valued attributes.

    Without children the result is a LeafNode. String children become
    TextNodes and absent (None) children are skipped, keeping order.
    """
    clean = {k: v for k, v in (attrs or {}).items() if v is not None}
    if children is None:
        return LeafNode(tag=tag, attrs=clean, events=dict(events or {}), key=key)
    return ContainerNode(
        tag=tag,
        attrs=clean,
        children=_normalize_children(children),
        events=dict(events or {}),
        key=key,
    )
