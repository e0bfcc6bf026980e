# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
Node trees, render contexts and templates.

This package turns per-field render contexts into abstract UI node trees
for an external presentation renderer.
"""

from formtree.ui.context import (
    Button,
    CheckboxLocals,
    FieldLocals,
    LeafLocals,
    ListItem,
    ListLocals,
    OptGroup,
    Option,
    RadioLocals,
    SelectLocals,
    StructLocals,
    TextboxLocals,
)
from formtree.ui.errors import (
    ListError,
    NotSupportedError,
    PresentationError,
    ReorderIndexError,
    TemplateError,
)
from formtree.ui.events import ChangeEvent, Clickable, ElementLookup, OnChange, OnClick
from formtree.ui.humanize import humanize
from formtree.ui.ids import IdAllocator, default_allocator, uid
from formtree.ui.lists import ListRowController, move
from formtree.ui.nodes import (
    ClassNames,
    ContainerNode,
    LeafNode,
    Node,
    Style,
    TextNode,
    element,
)
from formtree.ui.templates import (
    SemanticTemplates,
    TemplateRegistry,
    semantic_templates,
)

__all__ = [
    # Render contexts
    "Button",
    "CheckboxLocals",
    "FieldLocals",
    "LeafLocals",
    "ListItem",
    "ListLocals",
    "OptGroup",
    "Option",
    "RadioLocals",
    "SelectLocals",
    "StructLocals",
    "TextboxLocals",
    # Errors
    "ListError",
    "NotSupportedError",
    "PresentationError",
    "ReorderIndexError",
    "TemplateError",
    # Events
    "ChangeEvent",
    "Clickable",
    "ElementLookup",
    "OnChange",
    "OnClick",
    # Utilities
    "IdAllocator",
    "ListRowController",
    "default_allocator",
    "humanize",
    "move",
    "uid",
    # Nodes
    "ClassNames",
    "ContainerNode",
    "LeafNode",
    "Node",
    "Style",
    "TextNode",
    "element",
    # Templates
    "SemanticTemplates",
    "TemplateRegistry",
    "semantic_templates",
]
