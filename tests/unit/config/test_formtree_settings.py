"""Tests for FormtreeSettings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from formtree.config import FormtreeSettings


def test_defaults() -> None:
    settings = FormtreeSettings()
    assert settings.id_prefix == "__ID"
    assert settings.help_id_suffix == "-tip"
    assert settings.optional_suffix == " (optional)"
    assert settings.native_disabled_cascade is True
    assert settings.empty_option_text == "-"
    assert (
        settings.add_label,
        settings.remove_label,
        settings.up_label,
        settings.down_label,
    ) == ("Add", "Remove", "Up", "Down")


def test_load_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("FORMTREE_ID_PREFIX", "fld")
    monkeypatch.setenv("FORMTREE_NATIVE_DISABLED_CASCADE", "false")
    settings = FormtreeSettings.load()
    assert settings.id_prefix == "fld"
    assert settings.native_disabled_cascade is False


def test_empty_id_prefix_is_rejected() -> None:
    with pytest.raises(ValidationError):
        FormtreeSettings(id_prefix="")


def test_settings_are_frozen() -> None:
    settings = FormtreeSettings()
    with pytest.raises(ValidationError):
        settings.add_label = "Plus"
