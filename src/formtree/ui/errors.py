# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
Rendering error classes.

Template errors cover unsupported field kinds, locals that cannot be turned
into a tree, and callbacks that need a presentation document nobody bound.
List errors cover reordering requests and key bookkeeping.
"""

from __future__ import annotations

from typing import Any, Final

from formtree.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, FormtreeError

TEMPLATE = ErrorCategory.get_or_create("TEMPLATE")
TEMPLATE_NOT_SUPPORTED: Final = ErrorCode.get_or_create(
    "TEMPLATE_NOT_SUPPORTED", TEMPLATE
)
TEMPLATE_MISSING_INPUT: Final = ErrorCode.get_or_create(
    "TEMPLATE_MISSING_INPUT", TEMPLATE
)
TEMPLATE_NO_DOCUMENT: Final = ErrorCode.get_or_create("TEMPLATE_NO_DOCUMENT", TEMPLATE)

LIST = ErrorCategory.get_or_create("LIST")
LIST_INDEX_OUT_OF_RANGE: Final = ErrorCode.get_or_create(
    "LIST_INDEX_OUT_OF_RANGE", LIST
)
LIST_KEYS_MISMATCH: Final = ErrorCode.get_or_create("LIST_KEYS_MISMATCH", LIST)


class TemplateError(FormtreeError):
    """Base class for errors raised while building a node tree."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = TEMPLATE_MISSING_INPUT,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )


class NotSupportedError(TemplateError):
    """Raised for field kinds that have no template."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, code=TEMPLATE_NOT_SUPPORTED, **kwargs)


class PresentationError(TemplateError):
    """Raised when a callback needs the presentation document and none is bound."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, code=TEMPLATE_NO_DOCUMENT, **kwargs)


class ListError(FormtreeError):
    """Base class for list row bookkeeping errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = LIST_KEYS_MISMATCH,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )


class ReorderIndexError(ListError, IndexError):
    """Raised when a reorder request names an index outside the sequence."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, code=LIST_INDEX_OUT_OF_RANGE, **kwargs)
