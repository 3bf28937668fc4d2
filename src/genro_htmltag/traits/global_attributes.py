# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Global attributes: setters available on every element.

Enumerated and constrained global attributes (dir, translate, role,
tabindex, lang...) are validated by set_attribute() through the tables of
``values``, which also map booleans of ``translate`` or ``draggable`` to
their tokens.

The attribute families (``aria-*``, ``data-*``, ``on*``) accept keys with
or without their prefix, as strings or Enum members:

    >>> Div.create().add_aria_attribute(Aria.LABEL, 'Close').get_attribute('aria-label')
    'Close'
    >>> Div.create().add_event('click', 'go()').get_attribute('onclick')
    'go()'
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..attribute_store import canonical_name

if TYPE_CHECKING:
    from typing import Self


def bool_token(value: Any, true: str, false: str) -> Any:
    """Map True/False to the tokens of an enumerated attribute."""
    if value is True:
        return true
    if value is False:
        return false
    return value


def prefixed(prefix: str, key: str | Enum) -> str:
    """Return key with prefix ('aria-', 'data-', 'on') prepended if missing."""
    name = canonical_name(key)
    return name if name.startswith(prefix) else f"{prefix}{name}"


class HasId:
    def id(self, value: str | None) -> Self:
        return self.set_attribute("id", value)


class HasClass:
    def class_(self, value: str | list[str] | None, override: bool = False) -> Self:
        """Add CSS classes, keeping existing ones unless override is True.

        Duplicated tokens are dropped, first occurrence wins.
        None removes the attribute.
        """
        if value is None:
            return self.remove_attribute("class")
        if isinstance(value, (list, tuple)):
            value = " ".join(str(v) for v in value if v)
        if override:
            return self.set_attribute("class", value)
        return self.add_attribute("class", value)


class HasTitle:
    def title(self, value: str | None) -> Self:
        return self.set_attribute("title", value)


class HasStyle:
    def style(self, value: str | Mapping[str, Any] | None) -> Self:
        """Set inline CSS. A dict renders as 'prop: value;' declarations."""
        return self.set_attribute("style", value)


class HasLang:
    def lang(self, value: str | None) -> Self:
        return self.set_attribute("lang", value)


class HasDir:
    def dir(self, value: Any) -> Self:
        return self.set_attribute("dir", value)


class HasTabindex:
    def tabindex(self, value: int | str | None) -> Self:
        """Set the tab order. Values below -1 are rejected."""
        return self.set_attribute("tabindex", value)


class HasAccesskey:
    def accesskey(self, value: str | None) -> Self:
        return self.set_attribute("accesskey", value)


class CanBeHidden:
    def hidden(self, value: bool = True) -> Self:
        return self.set_attribute("hidden", value)


class CanBeAutofocus:
    def autofocus(self, value: bool = True) -> Self:
        return self.set_attribute("autofocus", value)


class CanBeInert:
    def inert(self, value: bool = True) -> Self:
        return self.set_attribute("inert", value)


class HasTranslate:
    def translate(self, value: Any) -> Self:
        """Set translate. True/False are mapped to 'yes'/'no'."""
        return self.set_attribute("translate", value)


class HasContentEditable:
    def contenteditable(self, value: Any) -> Self:
        return self.set_attribute("contenteditable", value)


class HasDraggable:
    def draggable(self, value: Any) -> Self:
        return self.set_attribute("draggable", value)


class HasSpellcheck:
    def spellcheck(self, value: Any) -> Self:
        return self.set_attribute("spellcheck", value)


class HasRole:
    def role(self, value: Any) -> Self:
        return self.set_attribute("role", value)


class HasPopover:
    def popover(self, value: Any = True) -> Self:
        """Set popover. True renders the bare attribute (same as 'auto')."""
        return self.set_attribute("popover", value)


class HasInputHints:
    """autocapitalize, enterkeyhint and inputmode (virtual keyboard hints)."""

    def autocapitalize(self, value: Any) -> Self:
        return self.set_attribute("autocapitalize", value)

    def enterkeyhint(self, value: Any) -> Self:
        return self.set_attribute("enterkeyhint", value)

    def inputmode(self, value: Any) -> Self:
        return self.set_attribute("inputmode", value)


# --- Attribute families ---


class HasAria:
    """``aria-*`` attributes. Booleans render as 'true'/'false'.

    ``aria-describedby`` keeps True as is: form controls expand it from
    their id at render time.
    """

    def add_aria_attribute(self, key: str | Enum, value: Any) -> Self:
        name = prefixed("aria-", key)
        if isinstance(value, (list, tuple)):
            value = " ".join(str(v) for v in value)
        elif name != "aria-describedby":
            value = bool_token(value, "true", "false")
        return self.set_attribute(name, value)

    def aria_attributes(self, values: Mapping[Any, Any]) -> Self:
        tag = self
        for key, value in values.items():
            tag = tag.add_aria_attribute(key, value)
        return tag

    def remove_aria_attribute(self, key: str | Enum) -> Self:
        return self.remove_attribute(prefixed("aria-", key))


class HasData:
    """``data-*`` attributes. Lists and dicts render as JSON."""

    def add_data_attribute(self, key: str | Enum, value: Any) -> Self:
        return self.set_attribute(prefixed("data-", key), value)

    def data_attributes(self, values: Mapping[Any, Any]) -> Self:
        tag = self
        for key, value in values.items():
            tag = tag.add_data_attribute(key, value)
        return tag

    def remove_data_attribute(self, key: str | Enum) -> Self:
        return self.remove_attribute(prefixed("data-", key))


class HasEvents:
    """Inline event handlers (``onclick``...)."""

    def add_event(self, name: str | Enum, handler: Any) -> Self:
        return self.set_attribute(prefixed("on", name), handler)

    def events(self, values: Mapping[Any, Any]) -> Self:
        tag = self
        for name, handler in values.items():
            tag = tag.add_event(name, handler)
        return tag

    def remove_event(self, name: str | Enum) -> Self:
        return self.remove_attribute(prefixed("on", name))


class GlobalAttributes(
    HasId,
    HasClass,
    HasTitle,
    HasStyle,
    HasLang,
    HasDir,
    HasTabindex,
    HasAccesskey,
    CanBeHidden,
    CanBeAutofocus,
    CanBeInert,
    HasTranslate,
    HasContentEditable,
    HasDraggable,
    HasSpellcheck,
    HasRole,
    HasPopover,
    HasInputHints,
    HasAria,
    HasData,
    HasEvents,
):
    """Every global attribute setter, mixed into BaseTag."""
