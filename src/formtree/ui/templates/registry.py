# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
Template registry.

Maps control kind names to render functions so a caller can replace a single
template (for example a custom radio layout) without forking a whole theme.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from formtree.ui.errors import NotSupportedError

Template = Callable[[Any], Any]

TEMPLATE_NAMES: tuple[str, ...] = (
    "textbox",
    "checkbox",
    "select",
    "radio",
    "date",
    "struct",
    "list",
)


class TemplateRegistry:
    """Registry of render functions keyed by control kind."""

    def __init__(self, templates: dict[str, Template] | None = None) -> None:
        self._templates: dict[str, Template] = dict(templates or {})

    def register(self, name: str, template: Template) -> None:
        """Register (or replace) the template for a control kind.

        Args:
            name: Control kind, e.g. "textbox" or "struct"
            template: Function taking locals and returning a node tree
        """
        self._templates[name] = template

    def get(self, name: str) -> Template:
        """Get the template for a control kind.

        Raises:
            NotSupportedError: If nothing is registered under ``name``
        """
        try:
            return self._templates[name]
        except KeyError:
            raise NotSupportedError(
                f"No template registered for '{name}'", template=name
            ) from None

    def names(self) -> list[str]:
        return list(self._templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates
