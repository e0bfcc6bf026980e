# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
formtree: schema-driven form rendering.

Given a schema node, the current value and precomputed validation state,
formtree produces an abstract UI node tree (controls, labels, help and error
hints) for an external presentation renderer.
"""

from formtree.config import FormtreeSettings
from formtree.errors import ErrorSeverity, FormtreeError
from formtree.schema import (
    Enumeration,
    ListOf,
    Maybe,
    Primitive,
    Refinement,
    SchemaError,
    SchemaKind,
    Struct,
    TypeInfo,
    get_options_of_enum,
    get_type_info,
)
from formtree.ui import (
    ClassNames,
    ContainerNode,
    IdAllocator,
    LeafNode,
    ListRowController,
    Node,
    NotSupportedError,
    ReorderIndexError,
    SemanticTemplates,
    Style,
    TemplateRegistry,
    TextNode,
    default_allocator,
    humanize,
    move,
    semantic_templates,
    uid,
)
from formtree.ui.form import FormRenderer

__all__ = [
    "ClassNames",
    "ContainerNode",
    "Enumeration",
    "ErrorSeverity",
    "FormRenderer",
    "FormtreeError",
    "FormtreeSettings",
    "IdAllocator",
    "LeafNode",
    "ListOf",
    "ListRowController",
    "Maybe",
    "Node",
    "NotSupportedError",
    "Primitive",
    "Refinement",
    "ReorderIndexError",
    "SchemaError",
    "SchemaKind",
    "SemanticTemplates",
    "Struct",
    "Style",
    "TemplateRegistry",
    "TextNode",
    "TypeInfo",
    "default_allocator",
    "get_options_of_enum",
    "get_type_info",
    "humanize",
    "move",
    "semantic_templates",
    "uid",
]
