# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""ContentModel - the body of a container element.

A ContentModel holds one text slot and an ordered sequence of children:

    - the text slot contains either encoded text (HTML-escaped on render)
      or a raw HTML fragment (inserted verbatim). The last call wins.
    - children are pre-rendered fragments or nested tags, rendered one per
      line after the text slot. Nested tags are rendered lazily, so they
      observe the defaults in force at render time.

Example:
    >>> model = ContentModel().set_encoded('<b>')
    >>> model.render()
    '&lt;b&gt;'
    >>> ContentModel().set_raw('<b>').append_child('<i>x</i>').render()
    '<b>\\n<i>x</i>'
"""

from __future__ import annotations

import html
from typing import Any

from genro_toolbox import safe_is_instance

ENCODED = "encoded"
RAW = "raw"


class ContentModel:
    """Immutable element body.

    Internal Attributes (via __slots__):
        _text: Text slot value ('' when unset).
        _mode: ENCODED or RAW, tells how _text is rendered.
        _children: Tuple of child fragments (str or tag objects).
    """

    __slots__ = ("_text", "_mode", "_children")

    def __init__(
        self,
        text: str = "",
        mode: str = ENCODED,
        children: tuple[Any, ...] = (),
    ) -> None:
        self._text = text
        self._mode = mode
        self._children = tuple(children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentModel):
            return False
        return (self._text, self._mode, self._children) == (
            other._text,
            other._mode,
            other._children,
        )

    def __repr__(self) -> str:
        return f"ContentModel(text={self._text!r}, mode={self._mode!r}, children={len(self._children)})"

    @property
    def text(self) -> str:
        """The unrendered text slot."""
        return self._text

    @property
    def is_raw(self) -> bool:
        return self._mode == RAW

    @property
    def children(self) -> tuple[Any, ...]:
        return self._children

    def set_encoded(self, text: str) -> ContentModel:
        """Replace the text slot with text escaped at render time."""
        return ContentModel(str(text), ENCODED, self._children)

    def set_raw(self, fragment: str) -> ContentModel:
        """Replace the text slot with a trusted fragment inserted verbatim."""
        return ContentModel(str(fragment), RAW, self._children)

    def append_child(self, fragment: Any) -> ContentModel:
        """Append a rendered fragment or a nested tag to the children.

        Raises:
            TypeError: If fragment is neither a str nor a tag.
        """
        # Tag classes import this module: check by name to avoid a circular import
        if not isinstance(fragment, str) and not safe_is_instance(
            fragment, "genro_htmltag.base.BaseTag"
        ):
            raise TypeError(f"Child must be a str or a tag, got {type(fragment).__name__}")
        return ContentModel(self._text, self._mode, self._children + (fragment,))

    def is_empty(self) -> bool:
        """True if neither text nor children have been set."""
        return self._text == "" and not self._children

    def render_text(self) -> str:
        """Render the text slot only."""
        if self._mode == RAW:
            return self._text
        return html.escape(self._text, quote=True)

    def render(self) -> str:
        """Render the text slot followed by every child, one per line."""
        lines = []
        text = self.render_text()
        if text:
            lines.append(text)
        for child in self._children:
            lines.append(str(child))
        return "\n".join(lines)

