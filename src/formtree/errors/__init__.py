# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree

"""
Error handling for formtree.
"""

from __future__ import annotations

from formtree.errors.base import (
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    FormtreeError,
)
from formtree.errors.registry import registry

__all__ = [
    "ErrorCategory",
    "ErrorCode",
    "ErrorSeverity",
    "FormtreeError",
    "registry",
]
