# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree

from __future__ import annotations

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z]+)")
_SEPARATORS = re.compile(r"[-\s]+")
_ID_SUFFIX = re.compile(r"_id$")


def underscored(s: str) -> str:
    """``firstName`` -> ``first_name``, ``already-set`` -> ``already_set``."""
    s = _CAMEL_BOUNDARY.sub(r"\1_\2", s.strip())
    return _SEPARATORS.sub("_", s).lower()


def capitalize(s: str) -> str:
    """Upper-case the first character only; the rest is left unchanged."""
    return s[:1].upper() + s[1:]


def humanize(s: str) -> str:
    """Turn a field name into a label: ``user_id`` -> ``User``."""
    return capitalize(_ID_SUFFIX.sub("", underscored(s)).replace("_", " "))
