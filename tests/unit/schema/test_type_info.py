"""Tests for wrapper unwrapping."""

from __future__ import annotations

import pytest

from formtree.schema import (
    SCHEMA_CYCLE,
    SCHEMA_MALFORMED,
    EnumNodeProtocol,
    Enumeration,
    ListNodeProtocol,
    ListOf,
    Maybe,
    Primitive,
    Refinement,
    SchemaError,
    SchemaKind,
    SchemaNodeProtocol,
    Struct,
    StructNodeProtocol,
    get_type_info,
    kind_of,
)


class TestGetTypeInfo:
    def test_plain_node_is_its_own_base(self) -> None:
        node = Primitive("Str")
        info = get_type_info(node)
        assert info.is_maybe is False
        assert info.is_subtype is False
        assert info.inner_type is node

    def test_maybe_is_stripped(self) -> None:
        base = Primitive("Num")
        info = get_type_info(Maybe(base))
        assert info.is_maybe is True
        assert info.is_subtype is False
        assert info.inner_type is base

    def test_refinement_is_stripped(self) -> None:
        base = Primitive("Num")
        info = get_type_info(Refinement(base, lambda n: n > 0))
        assert info.is_maybe is False
        assert info.is_subtype is True
        assert info.inner_type is base

    @pytest.mark.parametrize(
        "wrap",
        [
            lambda b: Maybe(Refinement(b)),
            lambda b: Refinement(Maybe(b)),
            lambda b: Maybe(Maybe(Refinement(Refinement(b)))),
            lambda b: Refinement(Maybe(Refinement(Maybe(b)))),
        ],
    )
    @pytest.mark.parametrize(
        "base",
        [
            Primitive("Str"),
            Enumeration({"a": "A"}),
            Struct({"name": Primitive("Str")}),
            ListOf(Primitive("Str")),
        ],
    )
    def test_any_order_and_multiplicity(self, wrap, base) -> None:
        info = get_type_info(wrap(base))
        assert info.is_maybe is True
        assert info.is_subtype is True
        assert info.inner_type is base
        assert info.inner_type.kind == base.kind

    def test_wrappers_below_a_struct_are_not_stripped(self) -> None:
        struct = Struct({"name": Maybe(Primitive("Str"))})
        info = get_type_info(struct)
        assert info.is_maybe is False
        assert info.inner_type.kind is SchemaKind.STRUCT

    def test_cycle_raises_schema_error(self) -> None:
        outer = Maybe()
        inner = Refinement(outer)
        outer.inner = inner

        with pytest.raises(SchemaError) as exc_info:
            get_type_info(outer)

        assert exc_info.value.code == SCHEMA_CYCLE
        assert exc_info.value.category.name == "SCHEMA"

    def test_self_reference_raises_schema_error(self) -> None:
        node = Maybe()
        node.inner = node

        with pytest.raises(SchemaError):
            get_type_info(node)

    def test_wrapper_without_inner_is_malformed(self) -> None:
        with pytest.raises(SchemaError) as exc_info:
            get_type_info(Maybe(Refinement()))

        assert exc_info.value.code == SCHEMA_MALFORMED
        assert exc_info.value.context["schema_kind"] == "subtype"

    def test_shared_base_is_not_a_cycle(self) -> None:
        base = Primitive("Str")
        first = get_type_info(Maybe(base))
        second = get_type_info(Refinement(base))
        assert first.inner_type is second.inner_type is base


class UnknownKind:
    kind = "date"
    name = None
    inner = None


class TestKindOf:
    def test_unknown_kind_is_malformed(self) -> None:
        with pytest.raises(SchemaError) as exc_info:
            get_type_info(UnknownKind())
        assert exc_info.value.code == SCHEMA_MALFORMED
        assert exc_info.value.context["schema_kind"] == "date"

    def test_unknown_kind_inside_a_wrapper(self) -> None:
        with pytest.raises(SchemaError):
            get_type_info(Maybe(UnknownKind()))

    def test_missing_kind_is_malformed(self) -> None:
        with pytest.raises(SchemaError):
            kind_of(object())

    def test_known_kinds(self) -> None:
        assert kind_of(Struct({})) is SchemaKind.STRUCT
        assert kind_of(ListOf(Primitive())) is SchemaKind.LIST


class TestNodeProtocols:
    def test_reference_nodes_satisfy_their_protocols(self) -> None:
        assert isinstance(Primitive(), SchemaNodeProtocol)
        assert isinstance(Enumeration({"a": "A"}), EnumNodeProtocol)
        assert isinstance(Struct({}), StructNodeProtocol)
        assert isinstance(ListOf(Primitive()), ListNodeProtocol)

    def test_per_kind_members_are_required(self) -> None:
        assert not isinstance(Primitive(), StructNodeProtocol)
        assert not isinstance(Struct({}), ListNodeProtocol)
        assert not isinstance(ListOf(Primitive()), EnumNodeProtocol)
