# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
Process-wide table of error categories and codes.

Packages declare their categories and codes at import time through
``ErrorCategory.get_or_create`` and ``ErrorCode.get_or_create``; both land
here, so a name always maps to the same object.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from formtree.errors.base import ErrorCategory, ErrorCode


class ErrorRegistry:
    """Singleton registry of error categories and codes."""

    _instance: ErrorRegistry | None = None
    _lock = threading.RLock()

    _categories: dict[str, ErrorCategory]
    _codes: dict[str, ErrorCode]

    def __new__(cls) -> ErrorRegistry:
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._categories = {}
                instance._codes = {}
                cls._instance = instance
            return cls._instance

    def category(
        self, name: str, parent: ErrorCategory | None = None
    ) -> ErrorCategory:
        """Get the category called ``name``, creating it on first use.

        ``parent`` only applies when the category is created.
        """
        from formtree.errors.base import ErrorCategory

        with self._lock:
            if name not in self._categories:
                self._categories[name] = ErrorCategory(name, parent)
            return self._categories[name]

    def code(self, name: str, category: ErrorCategory) -> ErrorCode:
        """Get the code called ``name``, creating it under ``category``.

        Raises:
            ValueError: If ``name`` is already registered under another category
        """
        from formtree.errors.base import ErrorCode

        with self._lock:
            existing = self._codes.get(name)
            if existing is None:
                self.category(category.name, category.parent)
                existing = self._codes[name] = ErrorCode(name, category)
            elif existing.category != category:
                raise ValueError(
                    f"Error code '{name}' is already registered "
                    f"under category '{existing.category}'"
                )
            return existing

    def find_code(self, name: str) -> ErrorCode | None:
        """Look up a code without creating it."""
        found = self._codes.get(name)
        if found is None:
            logging.getLogger("formtree.errors").warning(
                "Error code '%s' not found in registry", name
            )
        return found

    def categories(self) -> list[ErrorCategory]:
        with self._lock:
            return list(self._categories.values())

    def codes(self, category: ErrorCategory | None = None) -> list[ErrorCode]:
        """All registered codes, or those within ``category`` and its children."""
        with self._lock:
            return [
                code
                for code in self._codes.values()
                if category is None or code.category.is_subcategory_of(category)
            ]


registry = ErrorRegistry()
