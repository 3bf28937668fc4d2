# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Phrasing content: links, text-level elements and images."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..base import InlineTag, VoidTag
from ..traits.embedded import (
    CanBeIsmap,
    HasAlt,
    HasDecoding,
    HasDimensions,
    HasElementtiming,
    HasLoading,
    HasSrc,
    HasSrcset,
    HasUsemap,
)
from ..traits.link import (
    HasCrossorigin,
    HasDownload,
    HasFetchpriority,
    HasHref,
    HasHreflang,
    HasMimeType,
    HasPing,
    HasReferrerpolicy,
    HasRel,
    HasTarget,
)

if TYPE_CHECKING:
    from typing import Self


class A(
    HasHref,
    HasTarget,
    HasRel,
    HasHreflang,
    HasDownload,
    HasPing,
    HasReferrerpolicy,
    HasMimeType,
    InlineTag,
):
    """Hyperlink.

    Example:
        >>> A.create().href('/docs').target('_blank').content('Docs').render()
        '<a href="/docs" target="_blank">Docs</a>'
    """

    tag_name = "a"


class Span(InlineTag):
    tag_name = "span"


class I(InlineTag):  # noqa: E742
    tag_name = "i"


class Label(InlineTag):
    tag_name = "label"

    def for_(self, value: str | None) -> Self:
        """Bind the label to the control having this id."""
        return self.set_attribute("for", value)


class Img(
    HasSrc,
    HasAlt,
    HasDimensions,
    HasSrcset,
    HasLoading,
    HasDecoding,
    HasFetchpriority,
    HasCrossorigin,
    HasReferrerpolicy,
    CanBeIsmap,
    HasUsemap,
    HasElementtiming,
    VoidTag,
):
    tag_name = "img"
