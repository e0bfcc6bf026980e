# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
Schema capability consumed by the renderers.

Provides the node kinds, a reference node implementation, wrapper
unwrapping and enumeration option extraction.
"""

from formtree.schema.enums import get_options_of_enum
from formtree.schema.errors import SCHEMA_CYCLE, SCHEMA_MALFORMED, SchemaError
from formtree.schema.nodes import (
    EnumNodeProtocol,
    Enumeration,
    ListNodeProtocol,
    ListOf,
    Maybe,
    Primitive,
    Refinement,
    SchemaKind,
    SchemaNodeProtocol,
    Struct,
    StructNodeProtocol,
)
from formtree.schema.type_info import TypeInfo, get_type_info, kind_of

__all__ = [
    "SCHEMA_CYCLE",
    "SCHEMA_MALFORMED",
    "EnumNodeProtocol",
    "Enumeration",
    "ListNodeProtocol",
    "ListOf",
    "Maybe",
    "Primitive",
    "Refinement",
    "SchemaError",
    "SchemaKind",
    "SchemaNodeProtocol",
    "Struct",
    "StructNodeProtocol",
    "TypeInfo",
    "get_options_of_enum",
    "get_type_info",
    "kind_of",
]
