# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Document metadata: title, meta, link, base, style, script, template."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..base import BlockTag, InlineTag, VoidTag
from ..traits.embedded import HasSrc
from ..traits.link import (
    HasCrossorigin,
    HasFetchpriority,
    HasHref,
    HasHreflang,
    HasIntegrity,
    HasMedia,
    HasMimeType,
    HasReferrerpolicy,
    HasRel,
    HasTarget,
)
from ..traits.metadata import HasBlocking, HasCharset, HasHttpEquiv, HasScriptLoading, HasShadowRoot

if TYPE_CHECKING:
    from typing import Self


class Title(InlineTag):
    tag_name = "title"


class Meta(HasCharset, HasHttpEquiv, HasMedia, VoidTag):
    """Metadata element.

    ``<meta>`` has no body, so content() sets the ``content`` attribute.

    Example:
        >>> Meta.create().name('viewport').content('width=device-width').render()
        '<meta name="viewport" content="width=device-width">'
    """

    tag_name = "meta"

    def name(self, value: str | None) -> Self:
        return self.set_attribute("name", value)

    def content(self, value: str | None) -> Self:  # type: ignore[override]
        return self.set_attribute("content", value)


class Link(
    HasHref,
    HasRel,
    HasHreflang,
    HasMedia,
    HasMimeType,
    HasCrossorigin,
    HasReferrerpolicy,
    HasIntegrity,
    HasFetchpriority,
    HasBlocking,
    VoidTag,
):
    tag_name = "link"


class Base(HasHref, HasTarget, VoidTag):
    tag_name = "base"


class Style(HasMedia, HasBlocking, BlockTag):
    """Embedded CSS. Use html() for the stylesheet: content() escapes it."""

    tag_name = "style"


class Script(
    HasSrc,
    HasMimeType,
    HasScriptLoading,
    HasCrossorigin,
    HasIntegrity,
    HasReferrerpolicy,
    HasFetchpriority,
    HasBlocking,
    InlineTag,
):
    """Script element. Use html() for inline code: content() escapes it."""

    tag_name = "script"


class NoScript(InlineTag):
    tag_name = "noscript"


class Template(HasShadowRoot, InlineTag):
    tag_name = "template"
