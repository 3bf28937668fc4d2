# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Attributes of embedded content (images)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..base import attribute
from ..validations import Range

if TYPE_CHECKING:
    from typing import Self


class HasSrc:
    def src(self, value: str | None) -> Self:
        return self.set_attribute("src", value)


class HasAlt:
    def alt(self, value: str | None) -> Self:
        return self.set_attribute("alt", value)


class HasDimensions:
    """width and height in CSS pixels."""

    @attribute(constraint=Range(ge=0))
    def width(self, value: int | str | None) -> Self:
        return self.set_attribute("width", value)

    @attribute(constraint=Range(ge=0))
    def height(self, value: int | str | None) -> Self:
        return self.set_attribute("height", value)


class HasSrcset:
    def srcset(self, value: str | list[str] | None) -> Self:
        """Set candidate sources. A list is joined with ', '."""
        if isinstance(value, (list, tuple)):
            value = ", ".join(value)
        return self.set_attribute("srcset", value)

    def sizes(self, value: str | list[str] | None) -> Self:
        if isinstance(value, (list, tuple)):
            value = ", ".join(value)
        return self.set_attribute("sizes", value)


class HasLoading:
    def loading(self, value: Any) -> Self:
        return self.set_attribute("loading", value)


class HasDecoding:
    def decoding(self, value: Any) -> Self:
        return self.set_attribute("decoding", value)


class CanBeIsmap:
    def ismap(self, value: bool = True) -> Self:
        return self.set_attribute("ismap", value)


class HasUsemap:
    def usemap(self, value: str | None) -> Self:
        return self.set_attribute("usemap", value)


class HasElementtiming:
    def elementtiming(self, value: str | None) -> Self:
        return self.set_attribute("elementtiming", value)
