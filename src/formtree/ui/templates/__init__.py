# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""Templates turning render contexts into node trees."""

from formtree.ui.templates.registry import TEMPLATE_NAMES, Template, TemplateRegistry
from formtree.ui.templates.semantic import SemanticTemplates, semantic_templates

__all__ = [
    "TEMPLATE_NAMES",
    "SemanticTemplates",
    "Template",
    "TemplateRegistry",
    "semantic_templates",
]
