# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
Schema node capability and a reference implementation.

The rendering core only needs a ``kind`` tag per node, the wrapped node for
``maybe``/``subtype`` wrappers, the value->label mapping for enumerations,
the named fields of a struct and the element type of a list. Any object
satisfying SchemaNodeProtocol (and, for enumerations, structs and lists,
the matching per-kind protocol) can be rendered; the dataclasses below are the
implementation shipped with the package.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class SchemaKind(str, Enum):
    """Kind tag of a schema node."""

    PRIMITIVE = "primitive"
    MAYBE = "maybe"  # optional wrapper
    SUBTYPE = "subtype"  # refinement wrapper
    ENUMS = "enums"
    STRUCT = "struct"
    LIST = "list"

    @property
    def is_wrapper(self) -> bool:
        return self in (SchemaKind.MAYBE, SchemaKind.SUBTYPE)


@runtime_checkable
class SchemaNodeProtocol(Protocol):
    """Minimal capability consumed from the schema collaborator."""

    @property
    def kind(self) -> SchemaKind: ...

    @property
    def name(self) -> str | None: ...

    @property
    def inner(self) -> SchemaNodeProtocol | None: ...


@runtime_checkable
class EnumNodeProtocol(SchemaNodeProtocol, Protocol):
    """An ``enums`` node: values mapped to their display labels."""

    @property
    def mapping(self) -> Mapping[Any, str]: ...


@runtime_checkable
class StructNodeProtocol(SchemaNodeProtocol, Protocol):
    """A ``struct`` node: named fields in declaration order."""

    @property
    def fields(self) -> Mapping[str, Any]: ...


@runtime_checkable
class ListNodeProtocol(SchemaNodeProtocol, Protocol):
    """A ``list`` node: the schema of every element."""

    @property
    def element(self) -> Any: ...


@dataclass(eq=False)
class Primitive:
    """A leaf type such as Str, Num, Bool or Date."""

    name: str = "Str"

    @property
    def kind(self) -> SchemaKind:
        return SchemaKind.PRIMITIVE

    @property
    def inner(self) -> None:
        return None


@dataclass(eq=False)
class Maybe:
    """Marks the wrapped node as not required."""

    inner: Any = None
    name: str | None = None

    @property
    def kind(self) -> SchemaKind:
        return SchemaKind.MAYBE


@dataclass(eq=False)
class Refinement:
    """Constrains the wrapped node with a predicate.

    Rendering only unwraps refinements; ``predicate`` is carried for the
    caller's validator.
    """

    inner: Any = None
    predicate: Callable[[Any], bool] | None = None
    name: str | None = None

    @property
    def kind(self) -> SchemaKind:
        return SchemaKind.SUBTYPE


@dataclass(eq=False)
class Enumeration:
    """A closed set of values, each with a display label.

    The mapping is copied into a dict so iteration follows insertion order.
    """

    mapping: Mapping[Any, str] = field(default_factory=dict)
    name: str | None = None

    def __post_init__(self) -> None:
        self.mapping = dict(self.mapping)

    @classmethod
    def of(cls, values: list[str] | str, name: str | None = None) -> Enumeration:
        """Build an enumeration whose labels equal its values."""
        if isinstance(values, str):
            values = values.split()
        return cls({v: v for v in values}, name=name)

    @property
    def kind(self) -> SchemaKind:
        return SchemaKind.ENUMS

    @property
    def inner(self) -> None:
        return None


@dataclass(eq=False)
class Struct:
    """A fixed set of named fields, rendered in declaration order."""

    fields: Mapping[str, Any] = field(default_factory=dict)
    name: str | None = None

    def __post_init__(self) -> None:
        self.fields = dict(self.fields)

    @property
    def kind(self) -> SchemaKind:
        return SchemaKind.STRUCT

    @property
    def inner(self) -> None:
        return None


@dataclass(eq=False)
class ListOf:
    """An ordered, dynamically sized collection of ``element`` values."""

    element: Any = None
    name: str | None = None

    @property
    def kind(self) -> SchemaKind:
        return SchemaKind.LIST

    @property
    def inner(self) -> None:
        return None
