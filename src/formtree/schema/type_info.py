# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""Unwrapping of optional and refinement wrappers."""

from __future__ import annotations

from typing import Any, NamedTuple

from formtree.logging import get_logger
from formtree.schema.errors import SCHEMA_CYCLE, SCHEMA_MALFORMED, SchemaError
from formtree.schema.nodes import SchemaKind

logger = get_logger(__name__)


def kind_of(node: Any) -> SchemaKind:
    """Read the kind tag of ``node``.

    Raises:
        SchemaError: If the node has no kind tag or an unknown one
    """
    tag = getattr(node, "kind", None)
    try:
        return SchemaKind(tag)
    except ValueError:
        logger.error("Unknown schema kind", schema_kind=str(tag))
        raise SchemaError(
            f"Unknown schema kind {tag!r}", code=SCHEMA_MALFORMED, schema_kind=str(tag)
        ) from None


class TypeInfo(NamedTuple):
    is_maybe: bool
    is_subtype: bool
    inner_type: Any


def get_type_info(node: Any) -> TypeInfo:
    """Strip ``maybe`` and ``subtype`` wrappers, in any order and multiplicity.

    Args:
        node: Schema node satisfying SchemaNodeProtocol

    Returns:
        TypeInfo with a flag per wrapper kind seen and the first non-wrapper node

    Raises:
        SchemaError: If the chain revisits a node, a wrapper has no inner node
            or a node carries an unknown kind tag
    """
    is_maybe = False
    is_subtype = False
    seen: set[int] = set()
    current = node

    while True:
        kind = kind_of(current)
        if not kind.is_wrapper:
            break
        if id(current) in seen:
            logger.warning("Cyclic wrapper chain", schema_kind=kind.value)
            raise SchemaError(
                "Wrapper chain refers back to an already visited node",
                code=SCHEMA_CYCLE,
                schema_kind=kind.value,
            )
        seen.add(id(current))
        if kind is SchemaKind.MAYBE:
            is_maybe = True
        else:
            is_subtype = True
        inner = current.inner
        if inner is None:
            raise SchemaError(
                f"'{kind.value}' wrapper has no inner type",
                code=SCHEMA_MALFORMED,
                schema_kind=kind.value,
            )
        current = inner

    return TypeInfo(is_maybe=is_maybe, is_subtype=is_subtype, inner_type=current)
