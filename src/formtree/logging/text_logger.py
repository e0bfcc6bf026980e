# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
Keyword-context loggers.

TextLogger wraps a standard library logger so call sites pass context as
keyword arguments (``logger.debug("List row moved", from_index=1)``). The
keywords land on the log record as attributes.
"""

from __future__ import annotations

import logging
from typing import Any

from formtree.logging.config import LoggingSettings


class TextLogger:
    """Standard library logger taking keyword context."""

    def __init__(self, logger: logging.Logger, **context: Any):
        self._logger = logger
        self._context = context

    @property
    def name(self) -> str:
        return self._logger.name

    def bind(self, **context: Any) -> TextLogger:
        """Return a logger that adds ``context`` to every record."""
        return TextLogger(self._logger, **{**self._context, **context})

    def _log(self, level: int, message: str, context: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        # stacklevel 3 attributes the record to the caller of debug() etc.
        self._logger.log(
            level, message, extra={**self._context, **context}, stacklevel=3
        )

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, context)

    def error(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, context)

    def critical(self, message: str, **context: Any) -> None:
        self._log(logging.CRITICAL, message, context)


class TextLoggerFactory:
    """Creates loggers below one root name and manages that root's handlers.

    The root gets a NullHandler so nothing is printed until the host opts in.
    ``configure`` only ever removes handlers it added itself; handlers the
    host attached to the root are left alone.
    """

    def __init__(self, root_logger_name: str = "formtree"):
        self.root_logger_name = root_logger_name
        self.root_logger = logging.getLogger(root_logger_name)
        if not any(
            isinstance(h, logging.NullHandler) for h in self.root_logger.handlers
        ):
            self.root_logger.addHandler(logging.NullHandler())
        self._handlers: list[logging.Handler] = []

    def create_logger(self, component_name: str) -> TextLogger:
        """Logger for a component; module names already under the root are kept."""
        if component_name.startswith(f"{self.root_logger_name}."):
            logger_name = component_name
        else:
            logger_name = f"{self.root_logger_name}.{component_name}"
        return TextLogger(logging.getLogger(logger_name))

    def configure(self, settings: LoggingSettings) -> None:
        """Apply ``settings`` to the root logger."""
        for handler in self._handlers:
            self.root_logger.removeHandler(handler)
        self._handlers = []

        if settings.console_enabled:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter(settings.line_format, datefmt=settings.date_format)
            )
            self.root_logger.addHandler(handler)
            self._handlers.append(handler)

        self.root_logger.setLevel(settings.level.numeric)
