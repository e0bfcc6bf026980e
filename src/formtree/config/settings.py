# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
Rendering settings for formtree.

All values can be overridden through environment variables prefixed with
FORMTREE_ (for example FORMTREE_ID_PREFIX).
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FormtreeSettings(BaseSettings):
    """Settings consumed by the templates, the list controller and the form driver."""

    model_config = SettingsConfigDict(
        env_prefix="FORMTREE_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    id_prefix: str = Field(default="__ID", description="Prefix of allocated ids")
    help_id_suffix: str = Field(
        default="-tip", description="Suffix appended to a field id for its help hint"
    )
    optional_suffix: str = Field(
        default=" (optional)", description="Appended to labels of optional fields"
    )
    native_disabled_cascade: bool = Field(
        default=True,
        description=(
            "Whether the presentation layer disables fieldset descendants itself; "
            "when False the flag is pushed into every descendant control"
        ),
    )
    empty_option_text: str = Field(
        default="-", description="Text of the leading empty select option"
    )
    add_label: str = Field(default="Add", description="List add button label")
    remove_label: str = Field(default="Remove", description="List remove button label")
    up_label: str = Field(default="Up", description="List move-up button label")
    down_label: str = Field(default="Down", description="List move-down button label")

    @field_validator("id_prefix")
    @classmethod
    def validate_id_prefix(cls, v: str) -> str:
        if not v:
            raise ValueError("id_prefix must not be empty")
        return v

    @classmethod
    def load(cls) -> FormtreeSettings:
        """Load settings from environment variables or defaults."""
        return cls()
