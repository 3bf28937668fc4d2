# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""HTML serialization of tags.

This module turns a tag name, a resolved attribute mapping and a body into
HTML5 text. Three layouts exist:

    - void: ``<input type="text">`` (no closing tag, body ignored)
    - inline: ``<span>body</span>``
    - block: ``<div>\\nbody\\n</div>`` (``<div>\\n</div>`` when empty)

Attribute rules:
    - True renders the bare name, False and None are omitted
    - callables are called at render time and their result rendered
    - Enum members render their value
    - ``class`` lists are joined with spaces, ``style`` dicts become
      declarations, other lists and dicts are JSON encoded
    - values are HTML-escaped, quotes included

Example:
    >>> create_tag('p', 'Hello', {'class': ['a', 'b'], 'hidden': True})
    '<p class="a b" hidden>\\nHello\\n</p>'
    >>> begin_tag('div', {'id': 'main'})
    '<div id="main">'
"""

from __future__ import annotations

import html
import json
from collections.abc import Mapping
from enum import Enum
from typing import Any

from .attribute_store import canonical_name
from .exceptions import InvalidTagError

VOID = "void"
INLINE = "inline"
BLOCK = "block"

VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area", "base", "br", "col", "command", "embed", "hr", "img", "input",
        "keygen", "link", "meta", "param", "source", "track", "wbr",
    }
)  # fmt: skip

INLINE_ELEMENTS: frozenset[str] = frozenset(
    {
        "a", "abbr", "acronym", "audio", "b", "bdi", "bdo", "big", "button",
        "canvas", "cite", "code", "data", "datalist", "del", "dfn", "em",
        "i", "iframe", "ins", "kbd", "label", "map", "mark", "meter",
        "noscript", "object", "option", "output", "picture", "progress", "q",
        "ruby", "s", "samp", "script", "select", "slot", "small", "span",
        "strong", "sub", "sup", "svg", "template", "textarea", "time", "title",
        "tt", "u", "var", "video", "td", "th",
    }
)  # fmt: skip


def layout_for(tag_name: str) -> str:
    """Return the layout (VOID, INLINE or BLOCK) of an element name."""
    name = tag_name.lower()
    if name in VOID_ELEMENTS:
        return VOID
    if name in INLINE_ELEMENTS:
        return INLINE
    return BLOCK


def _validate_tag(tag_name: str) -> str:
    name = tag_name.strip().lower()
    if not name:
        raise InvalidTagError("Tag name cannot be empty.")
    return name


# --- Attributes ---


def _evaluate(value: Any) -> Any:
    """Call lazy values until a plain value is obtained."""
    while callable(value) and not isinstance(value, Enum):
        value = value()
    return value


def _format_value(name: str, value: Any) -> str | None:
    """Return the text of an evaluated attribute value, or None to omit it."""
    if isinstance(value, Enum):
        value = value.value
    if value is None or value is False:
        return None
    if value is True:
        return ""
    if isinstance(value, (list, tuple, set, frozenset)):
        if name == "class":
            tokens = [str(v) for v in value if v not in (None, "")]
            return " ".join(tokens) if tokens else None
        return json.dumps(list(value))
    if isinstance(value, Mapping):
        if name == "style":
            return " ".join(f"{k}: {v};" for k, v in value.items() if v is not None)
        return json.dumps(dict(value))
    return str(value)


def render_attributes(attributes: Mapping[str, Any] | None) -> str:
    """Render attributes as ' name="value"' pairs in mapping order.

    Args:
        attributes: Resolved attribute mapping.

    Returns:
        The attribute string, '' when nothing is rendered.

    Raises:
        InvalidAttributeName: If a name would break the markup.
    """
    if not attributes:
        return ""
    parts = []
    for key, value in attributes.items():
        name = canonical_name(key)
        value = _evaluate(value)
        text = _format_value(name, value)
        if text is None:
            continue
        if value is True:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{html.escape(text, quote=True)}"')
    return "".join(parts)


# --- Tags ---


def render(
    tag_name: str,
    layout: str,
    attributes: Mapping[str, Any] | None = None,
    body: str = "",
) -> str:
    """Render a complete element.

    Args:
        tag_name: Element name.
        layout: VOID, INLINE or BLOCK.
        attributes: Resolved attributes.
        body: Already rendered body (ignored for void elements).

    Returns:
        The element HTML.
    """
    name = _validate_tag(tag_name)
    opening = f"<{name}{render_attributes(attributes)}>"
    if layout == VOID:
        return opening
    if layout == INLINE:
        return f"{opening}{body}</{name}>"
    if body:
        return f"{opening}\n{body}\n</{name}>"
    return f"{opening}\n</{name}>"


def create_tag(tag_name: str, content: str = "", attributes: Mapping[str, Any] | None = None) -> str:
    """Render an element, choosing its layout from the name.

    Content is inserted verbatim.

    Raises:
        InvalidTagError: If tag_name is empty.
    """
    name = _validate_tag(tag_name)
    return render(name, layout_for(name), attributes, content)


def begin_tag(tag_name: str, attributes: Mapping[str, Any] | None = None) -> str:
    """Render the opening tag of a block element.

    Raises:
        InvalidTagError: If tag_name is empty, inline or void.
    """
    name = _validate_tag(tag_name)
    if layout_for(name) != BLOCK:
        raise InvalidTagError("Inline elements cannot be used with begin/end syntax.")
    return f"<{name}{render_attributes(attributes)}>"


def end_tag(tag_name: str) -> str:
    """Render the closing tag of a block element.

    Raises:
        InvalidTagError: If tag_name is empty, inline or void.
    """
    name = _validate_tag(tag_name)
    if layout_for(name) != BLOCK:
        raise InvalidTagError("Inline elements cannot be used with begin/end syntax.")
    return f"</{name}>"
