# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree

from __future__ import annotations

from formtree.schema.errors import SchemaError
from formtree.schema.nodes import EnumNodeProtocol, SchemaKind
from formtree.schema.type_info import kind_of
from formtree.ui.context import Option


def get_options_of_enum(node: EnumNodeProtocol) -> list[Option]:
    """Return one Option per enumeration entry, in the mapping's order."""
    kind = kind_of(node)
    if kind is not SchemaKind.ENUMS:
        raise SchemaError(
            f"Expected an enumeration, got '{kind.value}'", schema_kind=kind.value
        )
    return [Option(value=value, text=text) for value, text in node.mapping.items()]
