# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Forms and form controls.

Input subclasses fix the ``type`` attribute at construction time, before
any create() attribute:

    >>> InputCheckbox.create({'id': 'agree'}).checked().render()
    '<input type="checkbox" id="agree" checked>'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from ..attribute_store import AttributeStore
from ..base import BlockTag, InlineTag, VoidTag
from ..traits.embedded import HasAlt, HasDimensions, HasSrc
from ..traits.form import (
    CanBeChecked,
    CanBeDisabled,
    CanBeMultiple,
    CanBeUnchecked,
    CanBeNovalidate,
    CanBeReadonly,
    CanBeRequired,
    HasAccept,
    HasAcceptCharset,
    HasAction,
    HasAriaDescribedBy,
    HasAutocomplete,
    HasButtonType,
    HasChoiceLabel,
    HasCols,
    HasCommand,
    HasDirname,
    HasEnctype,
    HasForm,
    HasFormOverrides,
    HasInputType,
    HasLength,
    HasMethod,
    HasName,
    HasNumericBounds,
    HasPattern,
    HasPlaceholder,
    HasPopoverTarget,
    HasRows,
    HasValue,
    HasWrap,
)
from ..traits.link import HasRel, HasTarget


class Form(
    HasAction,
    HasMethod,
    HasEnctype,
    HasAcceptCharset,
    CanBeNovalidate,
    HasTarget,
    HasName,
    HasAutocomplete,
    HasRel,
    BlockTag,
):
    tag_name = "form"


class Button(
    HasAriaDescribedBy,
    HasButtonType,
    CanBeDisabled,
    HasName,
    HasValue,
    HasForm,
    HasFormOverrides,
    HasCommand,
    HasPopoverTarget,
    InlineTag,
):
    """Push button.

    Example:
        >>> Button.create().type('submit').content('Save').render()
        '<button type="submit">Save</button>'
    """

    tag_name = "button"


class Input(
    HasAriaDescribedBy,
    HasInputType,
    CanBeDisabled,
    CanBeRequired,
    CanBeReadonly,
    HasName,
    HasValue,
    HasForm,
    HasPlaceholder,
    HasLength,
    HasPattern,
    HasAutocomplete,
    CanBeChecked,
    HasNumericBounds,
    CanBeMultiple,
    HasAccept,
    HasFormOverrides,
    HasPopoverTarget,
    HasDirname,
    HasSrc,
    HasAlt,
    HasDimensions,
    VoidTag,
):
    """Input control. Subclasses set input_type to preset ``type``."""

    tag_name = "input"
    input_type: ClassVar[str | None] = None

    def __init__(self, attributes: Mapping[Any, Any] | None = None) -> None:
        super().__init__(attributes)
        if self.input_type is not None and "type" not in self._constructor:
            self._constructor = AttributeStore({"type": self.input_type}).merge(self._constructor)


class InputText(Input):
    input_type = "text"


class InputEmail(Input):
    input_type = "email"


class InputPassword(Input):
    input_type = "password"


class InputNumber(Input):
    input_type = "number"


class InputCheckbox(CanBeUnchecked, HasChoiceLabel, Input):
    """Checkbox with an optional bound label and unchecked value.

    Example:
        >>> InputCheckbox.create({'id': 'news', 'name': 'news'}).unchecked_value(False).render()
        '<input type="hidden" name="news" value="0">\\n<input type="checkbox" id="news" name="news">'
    """

    input_type = "checkbox"


class InputRadio(CanBeUnchecked, HasChoiceLabel, Input):
    input_type = "radio"


class InputHidden(Input):
    input_type = "hidden"


class InputSubmit(Input):
    input_type = "submit"


class TextArea(
    HasAriaDescribedBy,
    CanBeDisabled,
    CanBeRequired,
    CanBeReadonly,
    HasName,
    HasForm,
    HasPlaceholder,
    HasLength,
    HasAutocomplete,
    HasCols,
    HasRows,
    HasWrap,
    HasDirname,
    InlineTag,
):
    """Multi-line text control. Its content is the initial value."""

    tag_name = "textarea"
