# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
Identifier allocation.

Ids are a fixed prefix plus a strictly increasing decimal counter. The
default allocator lives for the whole process and is never persisted, so ids
are unique within one process only and differ between runs.
"""

from __future__ import annotations

import threading

from formtree.config import FormtreeSettings


class IdAllocator:
    """Monotonic, thread-safe identifier source."""

    def __init__(self, prefix: str = "__ID") -> None:
        self.prefix = prefix
        self._counter = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            value = self._counter
            self._counter += 1
        return f"{self.prefix}{value}"

    def reset(self) -> None:
        """Restart the counter at zero. Only meant for tests."""
        with self._lock:
            self._counter = 0


default_allocator = IdAllocator(FormtreeSettings.load().id_prefix)


def uid() -> str:
    """Return a fresh identifier from the process-wide allocator."""
    return default_allocator.next_id()
