# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
Logging configuration.

formtree never installs handlers on its own. A host that wants to see
formtree's records calls ``configure_logging`` with these settings, or lets
them load from ``FORMTREE_LOGGING_*`` environment variables.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Level names accepted in settings, matched case-insensitively."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def _missing_(cls, value: object) -> LogLevel | None:
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None

    @property
    def numeric(self) -> int:
        """The matching standard library level number."""
        return logging.getLevelNamesMapping()[self.value]


class LoggingSettings(BaseSettings):
    """
    Settings for the ``formtree`` root logger.
    Loads from environment variables prefixed with FORMTREE_LOGGING_.
    """

    model_config = SettingsConfigDict(
        env_prefix="FORMTREE_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    level: LogLevel = Field(
        default=LogLevel.WARNING, description="Threshold of the formtree root logger"
    )
    console_enabled: bool = Field(
        default=False, description="Attach a stderr handler to the root logger"
    )
    include_timestamp: bool = Field(
        default=True, description="Prefix console lines with the record time"
    )
    include_level: bool = Field(
        default=True, description="Prefix console lines with the level name"
    )
    date_format: str = Field(
        default="%Y-%m-%d %H:%M:%S", description="strftime format of the timestamp"
    )

    @field_validator("level", mode="before")
    @classmethod
    def parse_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return LogLevel(v)
        return v

    @property
    def line_format(self) -> str:
        """Format string for console handlers built from these settings."""
        parts = []
        if self.include_timestamp:
            parts.append("%(asctime)s")
        if self.include_level:
            parts.append("[%(levelname)s]")
        parts.extend(("%(name)s", "%(message)s"))
        return " ".join(parts)

    @classmethod
    def load(cls) -> LoggingSettings:
        """Load logging settings from environment variables or defaults."""
        return cls()
