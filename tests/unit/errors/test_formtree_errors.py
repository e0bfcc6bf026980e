"""Tests for the formtree error foundation.

Covers the registry-backed categories and codes, the base error contract
and the package-specific error classes built on it.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from formtree.errors import (
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    FormtreeError,
    registry,
)
from formtree.schema.errors import SCHEMA, SCHEMA_CYCLE, SCHEMA_MALFORMED, SchemaError
from formtree.ui.errors import (
    LIST_INDEX_OUT_OF_RANGE,
    TEMPLATE_NO_DOCUMENT,
    TEMPLATE_NOT_SUPPORTED,
    ListError,
    NotSupportedError,
    PresentationError,
    ReorderIndexError,
    TemplateError,
)


class TestRegistry:
    def test_codes_are_singletons(self) -> None:
        assert ErrorCode.get_or_create("SCHEMA_CYCLE", SCHEMA) is SCHEMA_CYCLE
        assert ErrorCode.get_by_code("SCHEMA_MALFORMED") is SCHEMA_MALFORMED
        assert SCHEMA_CYCLE in registry.codes(SCHEMA)
        assert SCHEMA in registry.categories()

    def test_unknown_code(self) -> None:
        with pytest.raises(ValueError):
            ErrorCode.get_by_code("NO_SUCH_CODE")
        assert ErrorCode.get_by_code("NO_SUCH_CODE", raise_if_missing=False) is None

    def test_subcategories(self) -> None:
        parent = ErrorCategory.get_or_create("TEST_PARENT")
        child = ErrorCategory.get_or_create("TEST_CHILD", parent)
        assert child.is_subcategory_of(parent)
        assert not parent.is_subcategory_of(child)
        assert not child.is_subcategory_of(SCHEMA)

    def test_codes_filtered_by_category(self) -> None:
        parent = ErrorCategory.get_or_create("TEST_OUTER")
        inner = ErrorCategory.get_or_create("TEST_INNER", parent)
        code = ErrorCode.get_or_create("TEST_INNER_FAILED", inner)
        assert code in registry.codes(parent)
        assert code not in registry.codes(SCHEMA)

    def test_code_cannot_move_between_categories(self) -> None:
        with pytest.raises(ValueError):
            ErrorCode.get_or_create(
                "SCHEMA_CYCLE", ErrorCategory.get_or_create("TEST_OTHER")
            )

    def test_only_package_codes_are_registered(self) -> None:
        names = {code.code for code in registry.codes()}
        assert "INTERNAL_ERROR" not in names
        assert {"SCHEMA_CYCLE", "LIST_KEYS_MISMATCH"} <= names


class TestFormtreeError:
    def test_base_class_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            FormtreeError("boom", code=SCHEMA_CYCLE)

    def test_code_must_be_an_error_code(self) -> None:
        with pytest.raises(TypeError):
            SchemaError("boom", code="SCHEMA_CYCLE")  # type: ignore[arg-type]

    def test_context_and_serialization(self) -> None:
        error = SchemaError(
            "Cycle", code=SCHEMA_CYCLE, context={"a": 1}, schema_kind="maybe"
        )
        error.add_context("depth", 3).add_context("path", "x")

        assert str(error) == "SCHEMA_CYCLE: Cycle"
        assert error.category == SCHEMA
        assert isinstance(error.timestamp, datetime)
        data = error.to_dict()
        assert data["code"] == "SCHEMA_CYCLE"
        assert data["category"] == "SCHEMA"
        assert data["severity"] == "error"
        assert data["context"] == {
            "a": 1,
            "schema_kind": "maybe",
            "depth": 3,
            "path": "x",
        }


class TestPackageErrors:
    def test_schema_error_defaults_to_malformed(self) -> None:
        assert SchemaError("bad").code == SCHEMA_MALFORMED

    def test_template_errors(self) -> None:
        not_supported = NotSupportedError("dates", template="date")
        no_document = PresentationError("detached")
        assert not_supported.code == TEMPLATE_NOT_SUPPORTED
        assert no_document.code == TEMPLATE_NO_DOCUMENT
        assert isinstance(not_supported, TemplateError)
        assert not_supported.context == {"template": "date"}

    def test_reorder_error_is_an_index_error(self) -> None:
        error = ReorderIndexError("out of range", index=5, length=2)
        assert isinstance(error, IndexError)
        assert isinstance(error, ListError)
        assert error.code == LIST_INDEX_OUT_OF_RANGE

    def test_severity_override(self) -> None:
        error = SchemaError("odd", severity=ErrorSeverity.WARNING)
        assert error.severity is ErrorSeverity.WARNING
