# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""Configuration for formtree."""

from formtree.config.settings import FormtreeSettings

__all__ = ["FormtreeSettings"]
