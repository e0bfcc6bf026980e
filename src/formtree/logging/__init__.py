# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
Public API for the formtree logging system.

Loggers are plain standard library loggers under the ``formtree`` namespace,
wrapped in TextLogger so call sites can pass structured keyword context.
"""

from __future__ import annotations

from formtree.logging.config import LoggingSettings, LogLevel
from formtree.logging.text_logger import TextLogger, TextLoggerFactory

_factory = TextLoggerFactory("formtree")


def get_logger(name: str) -> TextLogger:
    """Get a logger for the specified component name (typically __name__)."""
    return _factory.create_logger(name)


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure the formtree root logger from settings or the environment."""
    _factory.configure(settings or LoggingSettings.load())


__all__ = [
    "LogLevel",
    "LoggingSettings",
    "TextLogger",
    "TextLoggerFactory",
    "configure_logging",
    "get_logger",
]
