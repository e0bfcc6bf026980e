# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
Schema-specific error classes.

Raised when a schema node cannot be interpreted: a wrapper chain that loops
back on itself, a wrapper without an inner node, or a node of the wrong kind.
"""

from __future__ import annotations

from typing import Any, Final

from formtree.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, FormtreeError

SCHEMA = ErrorCategory.get_or_create("SCHEMA")
SCHEMA_CYCLE: Final = ErrorCode.get_or_create("SCHEMA_CYCLE", SCHEMA)
SCHEMA_MALFORMED: Final = ErrorCode.get_or_create("SCHEMA_MALFORMED", SCHEMA)


class SchemaError(FormtreeError):
    """Raised for malformed or cyclic schema nodes."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = SCHEMA_MALFORMED,
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
