# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
Schema-driven form rendering.

FormRenderer walks a schema node together with the current value, builds a
render context for every field and dispatches it to the registered template
for the field's base kind. Struct and list fields render their children
first and hand the resulting trees to the composite templates.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, NamedTuple

from formtree.config import FormtreeSettings
from formtree.logging import get_logger
from formtree.schema.enums import get_options_of_enum
from formtree.schema.nodes import ListNodeProtocol, SchemaKind, StructNodeProtocol
from formtree.schema.type_info import get_type_info, kind_of
from formtree.ui.context import (
    CheckboxLocals,
    ListLocals,
    Option,
    RadioLocals,
    SelectLocals,
    StructLocals,
    TextboxLocals,
)
from formtree.ui.events import ElementLookup, OnChange
from formtree.ui.humanize import humanize
from formtree.ui.ids import IdAllocator, default_allocator
from formtree.ui.lists import ListRowController
from formtree.ui.nodes import Node
from formtree.ui.templates import TemplateRegistry, semantic_templates

logger = get_logger(__name__)

Path = tuple[str | int, ...]

NUMBER_TYPES = {"Num": float, "Int": int}


def _parse_number(raw: Any, cast: Callable[[str], Any]) -> Any:
    # Unparseable input is passed through untouched for the validator to report.
    if raw is None or raw == "":
        return None
    try:
        return cast(raw)
    except (TypeError, ValueError):
        return raw


def dotted(path: Path) -> str:
    return ".".join(str(part) for part in path)


class RenderPass(NamedTuple):
    """Per-call state shared by every field of one render pass."""

    errors: Mapping[str, str]
    widgets: Mapping[str, str]
    # key paths of the list fields rendered in this pass
    lists: set[Path]


class FormRenderer:
    """Render a whole form from a schema.

    Row keys of list fields are kept on the renderer, so reusing one renderer
    across passes keeps list rows stable when they are reordered. Keys are
    stored by key path: the field path with every list index replaced by the
    key of that row, so a nested list follows its parent row when the parent
    list is reordered. Entries not reached by a pass are dropped after it.

    Args:
        templates: Template registry, the semantic templates by default
        allocator: Id source for field ids and list row keys
        settings: Rendering settings, loaded from the environment by default
        document: Presentation-side element lookup for the default templates
    """

    def __init__(
        self,
        templates: TemplateRegistry | None = None,
        *,
        allocator: IdAllocator | None = None,
        settings: FormtreeSettings | None = None,
        document: ElementLookup | None = None,
    ) -> None:
        self.settings = settings or FormtreeSettings.load()
        self.allocator = allocator or default_allocator
        self.templates = templates or semantic_templates(
            document=document, settings=self.settings, allocator=self.allocator
        )
        self.list_keys: dict[Path, list[str]] = {}

    def render(
        self,
        schema: Any,
        value: Any = None,
        *,
        on_change: OnChange[Any],
        label: str | None = None,
        help: str | None = None,
        errors: Mapping[str, str] | None = None,
        widgets: Mapping[str, str] | None = None,
        disabled: bool = False,
    ) -> Node:
        """Render ``value`` as a form for ``schema``.

        Args:
            schema: Root schema node
            value: Current form value
            on_change: Receives the whole new form value on every edit
            label: Label of the root field
            help: Help text of the root field
            errors: Error messages keyed by dotted field path ("" for the root)
            widgets: Widget overrides keyed by dotted field path: "radio" for
                enumerations, an input type ("textarea", "password",
                "hidden", "file", ...) for text fields
            disabled: Disable the whole form

        Returns:
            The root node tree
        """
        render_pass = RenderPass(
            errors=errors or {}, widgets=widgets or {}, lists=set()
        )
        tree = self._render_field(
            schema,
            value,
            path=(),
            key_path=(),
            on_change=on_change,
            label=label,
            help=help,
            render_pass=render_pass,
            disabled=disabled,
        )
        for stale in self.list_keys.keys() - render_pass.lists:
            del self.list_keys[stale]
        return tree

    def _label_for(self, path: Path, label: str | None, is_maybe: bool) -> str | None:
        if label is None and path and isinstance(path[-1], str):
            label = humanize(path[-1])
        if label and is_maybe:
            label = f"{label}{self.settings.optional_suffix}"
        return label

    def _render_field(
        self,
        schema: Any,
        value: Any,
        *,
        path: Path,
        key_path: Path,
        on_change: OnChange[Any],
        label: str | None,
        help: str | None,
        render_pass: RenderPass,
        disabled: bool,
    ) -> Node:
        info = get_type_info(schema)
        base = info.inner_type
        kind = kind_of(base)
        key = dotted(path)
        common: dict[str, Any] = {
            "label": self._label_for(path, label, info.is_maybe),
            "help": help,
            "error": render_pass.errors.get(key),
            "has_error": key in render_pass.errors,
            "disabled": disabled,
            "path": path,
        }
        field_logger = logger.bind(field_path=key)
        field_logger.debug("Rendering field", schema_kind=kind.value)

        if kind is SchemaKind.STRUCT:
            return self._render_struct(
                base, value, common, key_path, on_change, render_pass
            )
        if kind is SchemaKind.LIST:
            return self._render_list(
                base, value, common, key_path, on_change, render_pass
            )

        leaf = {
            **common,
            "id": self.allocator.next_id(),
            "name": key or None,
        }
        widget = render_pass.widgets.get(key)
        if kind is SchemaKind.ENUMS:
            if widget == "radio":
                return self.templates.get("radio")(
                    RadioLocals(
                        **leaf,
                        value=value,
                        on_change=on_change,
                        options=tuple(get_options_of_enum(base)),
                    )
                )
            options = (
                Option(value="", text=self.settings.empty_option_text),
                *get_options_of_enum(base),
            )

            def handle_select(raw: Any) -> None:
                on_change(None if raw == "" else raw)

            return self.templates.get("select")(
                SelectLocals(
                    **leaf,
                    value="" if value is None else value,
                    on_change=handle_select,
                    options=options,
                )
            )

        name = base.name or "Str"
        if name == "Bool":
            return self.templates.get("checkbox")(
                CheckboxLocals(**leaf, value=bool(value), on_change=on_change)
            )
        if name == "Date":
            return self.templates.get("date")(
                TextboxLocals(**leaf, type="date", value=value, on_change=on_change)
            )
        if name in NUMBER_TYPES:
            cast = NUMBER_TYPES[name]

            def handle_number(raw: Any) -> None:
                parsed = _parse_number(raw, cast)
                if isinstance(parsed, str):
                    field_logger.debug("Number not parsed", raw_value=parsed)
                on_change(parsed)

            return self.templates.get("textbox")(
                TextboxLocals(
                    **leaf,
                    type="number",
                    value=None if value is None else str(value),
                    on_change=handle_number,
                )
            )
        return self.templates.get("textbox")(
            TextboxLocals(
                **leaf, type=widget or "text", value=value, on_change=on_change
            )
        )

    def _child_disabled(self, disabled: bool) -> bool:
        # With native cascading the fieldset alone carries the flag.
        return disabled and not self.settings.native_disabled_cascade

    def _render_struct(
        self,
        base: StructNodeProtocol,
        value: Any,
        common: dict[str, Any],
        key_path: Path,
        on_change: OnChange[Any],
        render_pass: RenderPass,
    ) -> Node:
        current = dict(value or {})
        path: Path = common["path"]
        inputs: dict[str, Node] = {}

        for name, field_schema in base.fields.items():

            def handle_field(field_value: Any, name: str = name) -> None:
                on_change({**current, name: field_value})

            inputs[name] = self._render_field(
                field_schema,
                current.get(name),
                path=(*path, name),
                key_path=(*key_path, name),
                on_change=handle_field,
                label=None,
                help=None,
                render_pass=render_pass,
                disabled=self._child_disabled(common["disabled"]),
            )

        return self.templates.get("struct")(
            StructLocals(**common, order=tuple(base.fields), inputs=inputs)
        )

    def _render_list(
        self,
        base: ListNodeProtocol,
        value: Any,
        common: dict[str, Any],
        key_path: Path,
        on_change: OnChange[Any],
        render_pass: RenderPass,
    ) -> Node:
        elements = list(value or [])
        path: Path = common["path"]
        keys = self.list_keys.setdefault(key_path, [])
        render_pass.lists.add(key_path)
        # Reconcile keys with a value changed outside this renderer.
        del keys[len(elements) :]
        keys.extend(self.allocator.next_id() for _ in range(len(elements) - len(keys)))

        controller = ListRowController(
            elements,
            on_change,
            keys=keys,
            allocator=self.allocator,
            settings=self.settings,
            disabled=common["disabled"],
        )
        inputs = [
            self._render_field(
                base.element,
                element_value,
                path=(*path, i),
                key_path=(*key_path, keys[i]),
                on_change=lambda v, i=i: controller.set(i, v),
                label=None,
                help=None,
                render_pass=render_pass,
                disabled=self._child_disabled(common["disabled"]),
            )
            for i, element_value in enumerate(elements)
        ]
        return self.templates.get("list")(
            ListLocals(
                **common,
                items=controller.items(inputs),
                add=controller.add_button(),
            )
        )
