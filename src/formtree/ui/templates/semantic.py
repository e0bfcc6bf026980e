# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: formtree
"""
Semantic UI flavoured templates.

Each template takes a locals model and returns a node tree: the control
itself plus its chrome (label, help hint, error hint) inside a ``field``
wrapper. Structs and lists compose trees that were already rendered for
their children.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, NoReturn

from formtree.config import FormtreeSettings
from formtree.logging import get_logger
from formtree.ui.context import (
    Button,
    CheckboxLocals,
    FieldLocals,
    LeafLocals,
    ListItem,
    ListLocals,
    OptGroup,
    Option,
    RadioLocals,
    SelectLocals,
    StructLocals,
    TextboxLocals,
)
from formtree.ui.errors import NotSupportedError, PresentationError, TemplateError
from formtree.ui.events import ChangeEvent, ElementLookup, OnClick
from formtree.ui.ids import IdAllocator, default_allocator
from formtree.ui.nodes import ClassNames, Node, Style, element
from formtree.ui.templates.registry import TemplateRegistry

logger = get_logger(__name__)


def _alert(kind: str, children: Any) -> Node:
    return element("div", {"class": ClassNames(("ui", "message", kind))}, children)


def _legend(label: str) -> Node:
    return element("legend", {"class": ClassNames("ui header")}, label)


def _button(button: Button, key: Any = None) -> Node:
    return element(
        "button",
        {"class": ClassNames("ui basic button")},
        button.label,
        events={"click": button.click},
        key=key,
    )


def _option(option: Option, selected: set[Any] | None = None) -> Node:
    return element(
        "option",
        {
            "disabled": option.disabled,
            "value": option.value,
            "selected": None if selected is None else option.value in selected,
        },
        option.text,
        key=option.value,
    )


def _optgroup(group: OptGroup, selected: set[Any] | None = None) -> Node:
    return element(
        "optgroup",
        {"disabled": group.disabled, "label": group.label},
        [_option(option, selected) for option in group.options],
        key=group.label,
    )


class SemanticTemplates:
    """Leaf and composite templates sharing settings and a presentation document.

    Args:
        document: Presentation-side element lookup used by radio labels to
            forward clicks to their input
        settings: Rendering settings, loaded from the environment by default
        allocator: Id source for radio groups rendered without an id
    """

    def __init__(
        self,
        document: ElementLookup | None = None,
        settings: FormtreeSettings | None = None,
        allocator: IdAllocator | None = None,
    ) -> None:
        self.document = document
        self.settings = settings or FormtreeSettings.load()
        self.allocator = allocator or default_allocator

    # chrome

    def _help_id(self, control_id: str | None) -> str | None:
        if not control_id:
            return None
        return f"{control_id}{self.settings.help_id_suffix}"

    def _describe(
        self, attrs: dict[str, Any], locals_: FieldLocals, control_id: str | None
    ) -> None:
        if locals_.help and not attrs.get("aria-describedby"):
            attrs["aria-describedby"] = self._help_id(control_id)

    def _label(self, label: str | None, html_for: str | None) -> Node | None:
        if not label:
            return None
        return element("label", {"for": html_for}, label)

    def _help(self, locals_: FieldLocals, control_id: str | None) -> Node | None:
        if not locals_.help:
            return None
        return element(
            "div",
            {
                "class": ClassNames("ui pointing label visible"),
                "id": self._help_id(control_id),
            },
            locals_.help,
        )

    def _error(self, locals_: FieldLocals) -> Node | None:
        if not locals_.has_error or not locals_.error:
            return None
        return element(
            "div", {"class": ClassNames("ui pointing label visible red")}, locals_.error
        )

    def _field(
        self, locals_: FieldLocals, children: Any, *extra: str, key: Any = None
    ) -> Node:
        classes = ClassNames(
            {
                "field": True,
                **{name: True for name in extra},
                "error": locals_.has_error,
                "disabled": locals_.disabled,
            }
        )
        return element("div", {"class": classes}, children, key=key)

    # leaf templates

    def _hidden(self, locals_: TextboxLocals) -> Node:
        on_change = locals_.on_change

        def handle_change(evt: ChangeEvent) -> None:
            on_change(evt.target.value)

        return element(
            "input",
            {"type": "hidden", "value": locals_.value, "name": locals_.name},
            events={"change": handle_change},
        )

    def textbox(self, locals_: TextboxLocals) -> Node:
        """Text-like input, textarea or file picker with its chrome."""
        if locals_.type == "hidden":
            return self._hidden(locals_)

        attrs = dict(locals_.attrs)
        control_id = locals_.control_id
        attrs["id"] = control_id
        attrs.setdefault("name", locals_.name)

        tag = "textarea"
        if locals_.type != "textarea":
            tag = "input"
            attrs["type"] = locals_.type

        attrs["class"] = ClassNames(attrs.get("class")).with_flags("form-control")
        attrs["disabled"] = locals_.disabled

        on_change = locals_.on_change
        if locals_.type == "file":
            # file inputs cannot be set programmatically

            def handle_change(evt: ChangeEvent) -> None:
                files = evt.target.files
                on_change(files[0] if files else None)

        else:
            attrs["value"] = locals_.value

            def handle_change(evt: ChangeEvent) -> None:
                on_change(evt.target.value)

        self._describe(attrs, locals_, control_id)
        control = element(tag, attrs, events={"change": handle_change})

        logger.debug("Rendered textbox", template="textbox", field_id=control_id)
        return self._field(
            locals_,
            [
                self._label(locals_.label, control_id),
                control,
                self._help(locals_, control_id),
                self._error(locals_),
            ],
        )

    def checkbox(self, locals_: CheckboxLocals) -> Node:
        """Checkbox with the label rendered after the control."""
        attrs = dict(locals_.attrs)
        control_id = locals_.control_id
        attrs["id"] = control_id
        attrs.setdefault("name", locals_.name)
        attrs["type"] = "checkbox"
        attrs["disabled"] = locals_.disabled
        attrs["checked"] = bool(locals_.value)

        on_change = locals_.on_change

        def handle_change(evt: ChangeEvent) -> None:
            on_change(bool(evt.target.checked))

        self._describe(attrs, locals_, control_id)
        control = element("input", attrs, events={"change": handle_change})

        # control first, then label
        group = element(
            "div",
            {"class": ClassNames("ui checkbox")},
            [
                control,
                self._label(locals_.label, control_id),
                self._help(locals_, control_id),
                self._error(locals_),
            ],
        )
        return self._field(locals_, group, "inline")

    def select(self, locals_: SelectLocals) -> Node:
        """Single or multiple select with plain options and option groups."""
        attrs = dict(locals_.attrs)
        control_id = locals_.control_id
        attrs["id"] = control_id
        attrs.setdefault("name", locals_.name)
        attrs["class"] = ClassNames(attrs.get("class")).with_flags("form-control")
        attrs["multiple"] = locals_.is_multiple
        attrs["disabled"] = locals_.disabled

        on_change = locals_.on_change
        is_multiple = locals_.is_multiple

        def handle_change(evt: ChangeEvent) -> None:
            if is_multiple:
                # document order, not selection order
                on_change(
                    [option.value for option in evt.target.options if option.selected]
                )
            else:
                on_change(evt.target.value)

        self._describe(attrs, locals_, control_id)

        # A multiple select has no scalar value; selection is carried per option.
        selected: set[Any] | None = None
        if is_multiple:
            selected = set(locals_.value or ())
        else:
            attrs["value"] = locals_.value
        options = [
            _optgroup(entry, selected)
            if isinstance(entry, OptGroup)
            else _option(entry, selected)
            for entry in locals_.options
        ]

        control = element(
            "select", attrs, options, events={"change": handle_change}
        )
        return self._field(
            locals_,
            [
                self._label(locals_.label, control_id),
                control,
                self._help(locals_, control_id),
                self._error(locals_),
            ],
        )

    def _click_through(self, element_id: str) -> OnClick:
        def handle_click(event: Any = None) -> None:
            if self.document is None:
                raise PresentationError(
                    "No document bound; cannot forward label click",
                    element_id=element_id,
                )
            target = self.document.get_element_by_id(element_id)
            if target is None:
                raise PresentationError(
                    f"No element with id '{element_id}'", element_id=element_id
                )
            target.click()

        return handle_click

    def radio(self, locals_: RadioLocals) -> Node:
        """One radio input per option, grouped, sharing a base id."""
        base_id = locals_.control_id or self.allocator.next_id()
        on_change = locals_.on_change

        def handle_change(evt: ChangeEvent) -> None:
            on_change(evt.target.value)

        wants_autofocus = "autofocus" in locals_.attrs
        described_by = locals_.attrs.get("aria-describedby") or (
            base_id if locals_.label else None
        )

        rows = []
        for i, option in enumerate(locals_.options):
            attrs = dict(locals_.attrs)
            attrs["type"] = "radio"
            attrs["checked"] = option.value == locals_.value
            attrs["disabled"] = locals_.disabled
            attrs["value"] = option.value
            attrs["name"] = locals_.name or base_id
            attrs["id"] = f"{base_id}_{i}"
            attrs["aria-describedby"] = described_by
            if wants_autofocus and i > 0:
                attrs["autofocus"] = False

            control = element("input", attrs, events={"change": handle_change})
            label = element(
                "label",
                None,
                option.text,
                events={"click": self._click_through(attrs["id"])},
            )
            rows.append(
                element(
                    "div",
                    {"class": ClassNames("field")},
                    element(
                        "div",
                        {"class": ClassNames("ui radio checkbox")},
                        [control, label],
                    ),
                    key=option.value,
                )
            )

        group = element("div", {"class": ClassNames("grouped fields")}, rows)
        return self._field(
            locals_,
            [
                self._label(locals_.label, base_id),
                group,
                self._help(locals_, base_id),
                self._error(locals_),
            ],
        )

    def date(self, locals_: LeafLocals | None = None) -> NoReturn:
        raise NotSupportedError("dates are not (yet) supported", template="date")

    # composite templates

    def _fieldset(self, locals_: FieldLocals, rows: Iterable[Node | None]) -> Node:
        return element(
            "fieldset",
            {
                "disabled": locals_.disabled,
                "style": Style(border=0, margin=0, padding=0),
                "class": ClassNames(
                    {
                        "ui": True,
                        "form": True,
                        "segment": len(locals_.path) > 0,
                        "error": locals_.has_error,
                    }
                ),
            },
            list(rows),
        )

    def _heading(self, locals_: FieldLocals) -> list[Node | None]:
        return [
            _legend(locals_.label) if locals_.label else None,
            _alert("info", locals_.help) if locals_.help else None,
        ]

    def _error_alert(self, locals_: FieldLocals) -> Node | None:
        if locals_.error and locals_.has_error:
            return _alert("error", locals_.error)
        return None

    def struct(self, locals_: StructLocals) -> Node:
        """Fieldset with the inputs named in ``order``; other inputs are left out."""
        rows = self._heading(locals_)
        for name in locals_.order:
            if name not in locals_.inputs:
                raise TemplateError(
                    f"No rendered input for field '{name}'", field_name=name
                )
            rows.append(locals_.inputs[name])
        rows.append(self._error_alert(locals_))
        return self._fieldset(locals_, rows)

    def _row(self, item: ListItem) -> Node:
        if not item.buttons:
            return element(
                "div",
                {"class": ClassNames("ui grid")},
                [
                    element(
                        "div", {"class": ClassNames("sixteen wide column")}, item.input
                    )
                ],
                key=item.key,
            )
        buttons = element(
            "div",
            {"class": ClassNames("ui basic buttons")},
            [_button(button, key=i) for i, button in enumerate(item.buttons)],
        )
        return element(
            "div",
            {"class": ClassNames("ui grid")},
            [
                element("div", {"class": ClassNames("eight wide column")}, item.input),
                element("div", {"class": ClassNames("four wide column")}, buttons),
            ],
            key=item.key,
        )

    def list(self, locals_: ListLocals) -> Node:
        """Fieldset with one keyed grid row per item and an optional add button."""
        rows = self._heading(locals_)
        rows.extend(self._row(item) for item in locals_.items)
        rows.append(self._error_alert(locals_))
        if locals_.add is not None:
            rows.append(_button(locals_.add))
        return self._fieldset(locals_, rows)

    def registry(self) -> TemplateRegistry:
        return TemplateRegistry(
            {
                "textbox": self.textbox,
                "checkbox": self.checkbox,
                "select": self.select,
                "radio": self.radio,
                "date": self.date,
                "struct": self.struct,
                "list": self.list,
            }
        )


def semantic_templates(
    document: ElementLookup | None = None,
    settings: FormtreeSettings | None = None,
    allocator: IdAllocator | None = None,
) -> TemplateRegistry:
    """Build the default template registry."""
    return SemanticTemplates(
        document=document, settings=settings, allocator=allocator
    ).registry()
