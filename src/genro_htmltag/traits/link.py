# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Hyperlink and resource fetching attributes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing import Self


class HasHref:
    def href(self, value: str | None) -> Self:
        return self.set_attribute("href", value)


class HasTarget:
    def target(self, value: Any) -> Self:
        """Set the browsing context ('_blank', '_self', '_parent', '_top' or Target)."""
        return self.set_attribute("target", value)


class HasRel:
    def rel(self, value: str | list[str] | None) -> Self:
        """Set link relations. A list is joined with spaces."""
        if isinstance(value, (list, tuple)):
            value = " ".join(str(v) for v in value)
        return self.set_attribute("rel", value)


class HasHreflang:
    def hreflang(self, value: str | None) -> Self:
        return self.set_attribute("hreflang", value)


class HasDownload:
    def download(self, value: str | bool = True) -> Self:
        """Mark the link as a download. A string suggests the file name."""
        return self.set_attribute("download", value)


class HasPing:
    def ping(self, value: str | list[str] | None) -> Self:
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        return self.set_attribute("ping", value)


class HasCrossorigin:
    def crossorigin(self, value: Any) -> Self:
        return self.set_attribute("crossorigin", value)


class HasReferrerpolicy:
    def referrerpolicy(self, value: Any) -> Self:
        return self.set_attribute("referrerpolicy", value)


class HasMedia:
    def media(self, value: str | None) -> Self:
        return self.set_attribute("media", value)


class HasMimeType:
    """MIME ``type`` of a linked resource (``<a>``, ``<link>``)."""

    def type(self, value: str | None) -> Self:
        return self.set_attribute("type", value)


class HasIntegrity:
    def integrity(self, value: str | None) -> Self:
        return self.set_attribute("integrity", value)


class HasFetchpriority:
    def fetchpriority(self, value: Any) -> Self:
        return self.set_attribute("fetchpriority", value)
