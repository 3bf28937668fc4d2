# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Form and form control attributes.

Element-specific value sets are declared with the @attribute marker, so
the rule also applies to set_attribute() on the same element:

    >>> Button.create().set_attribute('type', 'bad')
    Traceback (most recent call last):
    ...
    ValueNotInAllowedSet: `bad` is not a valid value for `type`. Allowed values are: 'button', 'reset', 'submit'.

HasAriaDescribedBy expands ``aria-describedby=True`` into the id of the
help text bound to the control, at render time. HasChoiceLabel and
CanBeUnchecked add companion markup (a label, a hidden input) around
checkboxes and radios.
"""

from __future__ import annotations

import html
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..attribute_store import AttributeStore
from ..base import attribute
from ..renderer import INLINE, VOID, render
from ..validations import Range, check_one_of
from ..values import Autocomplete, ButtonCommand, ButtonType, Enctype, InputType, Method, Wrap

if TYPE_CHECKING:
    from typing import Self

DEFAULT_DESCRIBEDBY_SUFFIX = "help"


# --- Common control attributes ---


class CanBeDisabled:
    def disabled(self, value: bool = True) -> Self:
        return self.set_attribute("disabled", value)


class CanBeRequired:
    def required(self, value: bool = True) -> Self:
        return self.set_attribute("required", value)


class CanBeReadonly:
    def readonly(self, value: bool = True) -> Self:
        return self.set_attribute("readonly", value)


class HasName:
    def name(self, value: str | None) -> Self:
        return self.set_attribute("name", value)


class HasValue:
    def value(self, value: Any) -> Self:
        return self.set_attribute("value", value)


class HasForm:
    def form(self, value: str | None) -> Self:
        """Associate the control with the form having this id."""
        return self.set_attribute("form", value)


class HasPlaceholder:
    def placeholder(self, value: str | None) -> Self:
        return self.set_attribute("placeholder", value)


class HasLength:
    """minlength and maxlength of text controls."""

    @attribute(constraint=Range(ge=0))
    def maxlength(self, value: int | str | None) -> Self:
        return self.set_attribute("maxlength", value)

    @attribute(constraint=Range(ge=0))
    def minlength(self, value: int | str | None) -> Self:
        return self.set_attribute("minlength", value)


class HasPattern:
    def pattern(self, value: str | None) -> Self:
        return self.set_attribute("pattern", value)


class HasAutocomplete:
    def autocomplete(self, value: Any) -> Self:
        """Set autocomplete. True/False are mapped to 'on'/'off'."""
        if value is True:
            value = Autocomplete.ON
        elif value is False:
            value = Autocomplete.OFF
        return self.set_attribute("autocomplete", value)


class HasAriaDescribedBy:
    """Expands ``aria-describedby=True`` into ``<id>-<suffix>``.

    The suffix defaults to 'help'. Without an id the attribute is dropped.
    """

    def aria_describedby_suffix(self, value: str) -> Self:
        return self._with_option("aria_describedby_suffix", value)

    def _finalize_attributes(self, store: AttributeStore) -> AttributeStore:
        store = super()._finalize_attributes(store)
        described = store.get("aria-describedby")
        if described is not True and described != "true":
            return store
        element_id = store.get("id")
        if element_id is None:
            return store.remove("aria-describedby")
        suffix = self._option("aria_describedby_suffix") or DEFAULT_DESCRIBEDBY_SUFFIX
        return store.set("aria-describedby", f"{element_id}-{suffix}")


# --- Button ---


class HasButtonType:
    @attribute("type", values=ButtonType)
    def type(self, value: Any) -> Self:
        """Set the button behavior ('button', 'reset' or 'submit')."""
        return self.set_attribute("type", value)


class HasCommand:
    """Invoker commands: command and commandfor."""

    def command(self, value: Any) -> Self:
        """Set the command. Custom commands must start with '--'."""
        if not (isinstance(value, str) and value.startswith("--")):
            value = check_one_of(value, ButtonCommand, "command")
        return self.set_attribute("command", value)

    def commandfor(self, value: str | None) -> Self:
        return self.set_attribute("commandfor", value)


class HasPopoverTarget:
    def popovertarget(self, value: str | None) -> Self:
        return self.set_attribute("popovertarget", value)

    def popovertargetaction(self, value: Any) -> Self:
        return self.set_attribute("popovertargetaction", value)


class HasFormOverrides:
    """formaction, formenctype, formmethod, formnovalidate and formtarget."""

    def formaction(self, value: str | None) -> Self:
        return self.set_attribute("formaction", value)

    def formenctype(self, value: Any) -> Self:
        return self.set_attribute("formenctype", value)

    def formmethod(self, value: Any) -> Self:
        return self.set_attribute("formmethod", value)

    def formnovalidate(self, value: bool = True) -> Self:
        return self.set_attribute("formnovalidate", value)

    def formtarget(self, value: Any) -> Self:
        return self.set_attribute("formtarget", value)


# --- Form ---


class HasAction:
    def action(self, value: str | None) -> Self:
        return self.set_attribute("action", value)


class HasMethod:
    @attribute(values=Method)
    def method(self, value: Any) -> Self:
        return self.set_attribute("method", value)


class HasEnctype:
    @attribute(values=Enctype)
    def enctype(self, value: Any) -> Self:
        return self.set_attribute("enctype", value)


class HasAcceptCharset:
    def accept_charset(self, value: str | None) -> Self:
        return self.set_attribute("accept-charset", value)


class CanBeNovalidate:
    def novalidate(self, value: bool = True) -> Self:
        return self.set_attribute("novalidate", value)


# --- Input ---


class HasInputType:
    @attribute("type", values=InputType)
    def type(self, value: Any) -> Self:
        return self.set_attribute("type", value)


class CanBeChecked:
    def checked(self, value: bool = True) -> Self:
        return self.set_attribute("checked", value)


class HasNumericBounds:
    """min, max and step of number, range and date controls."""

    def min(self, value: Any) -> Self:
        return self.set_attribute("min", value)

    def max(self, value: Any) -> Self:
        return self.set_attribute("max", value)

    def step(self, value: Any) -> Self:
        return self.set_attribute("step", value)


class CanBeMultiple:
    def multiple(self, value: bool = True) -> Self:
        return self.set_attribute("multiple", value)


class HasAccept:
    def accept(self, value: str | list[str] | None) -> Self:
        """Set accepted file types. A list is joined with ','."""
        if isinstance(value, (list, tuple)):
            value = ",".join(value)
        return self.set_attribute("accept", value)


# --- Textarea ---


class HasCols:
    @attribute(constraint=Range(gt=0))
    def cols(self, value: int | str | None) -> Self:
        return self.set_attribute("cols", value)


class HasRows:
    @attribute(constraint=Range(gt=0))
    def rows(self, value: int | str | None) -> Self:
        return self.set_attribute("rows", value)


class HasWrap:
    @attribute(values=Wrap)
    def wrap(self, value: Any) -> Self:
        return self.set_attribute("wrap", value)


class HasDirname:
    def dirname(self, value: str | None) -> Self:
        return self.set_attribute("dirname", value)


# --- Checkbox and radio ---


class HasChoiceLabel:
    """Label bound to a checkbox or radio through ``for=<id>``.

    The label renders after the control, or around it with
    enclosed_by_label():

        >>> InputCheckbox.create({'id': 'agree'}).label('I agree').render()
        '<input type="checkbox" id="agree">\\n<label for="agree">I agree</label>'
    """

    def label(self, value: str | None) -> Self:
        """Set the label text, HTML-escaped at render time. None drops the label."""
        return self._with_option("label", value)

    def label_attributes(self, values: Mapping[Any, Any] | None) -> Self:
        """Set the attributes of the label. An explicit ``for`` wins over the id."""
        return self._with_option("label_attributes", AttributeStore(values))

    def enclosed_by_label(self, value: bool = True) -> Self:
        return self._with_option("enclosed_by_label", value)

    def _render_element(self, attributes: AttributeStore) -> str:
        element = super()._render_element(attributes)
        text = self._option("label")
        if not text:
            return element
        label_attributes = self._option("label_attributes") or AttributeStore()
        if "for" not in label_attributes and attributes.get("id") is not None:
            label_attributes = AttributeStore({"for": attributes["id"]}).merge(label_attributes)
        text = html.escape(str(text), quote=True)
        if self._option("enclosed_by_label"):
            return render("label", INLINE, label_attributes, f"\n{element}\n{text}\n")
        return f"{element}\n{render('label', INLINE, label_attributes, text)}"


class CanBeUnchecked:
    """Hidden input submitting a value when the control is left unchecked.

    The hidden input shares the control's name and renders before it.
    Booleans are submitted as 1/0.
    """

    def unchecked_value(self, value: Any) -> Self:
        return self._with_option("unchecked_value", value)

    def _render_element(self, attributes: AttributeStore) -> str:
        element = super()._render_element(attributes)
        value = self._option("unchecked_value")
        if value is None:
            return element
        if isinstance(value, bool):
            value = int(value)
        hidden = AttributeStore({"type": "hidden", "name": attributes.get("name"), "value": value})
        return f"{render('input', VOID, hidden)}\n{element}"
