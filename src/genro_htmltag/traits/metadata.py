# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Document metadata attributes: meta, script and template."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing import Self


class HasCharset:
    def charset(self, value: str | None) -> Self:
        return self.set_attribute("charset", value)


class HasHttpEquiv:
    def http_equiv(self, value: str | None) -> Self:
        return self.set_attribute("http-equiv", value)


class HasScriptLoading:
    """async, defer and nomodule of classic and module scripts."""

    def async_(self, value: bool = True) -> Self:
        return self.set_attribute("async", value)

    def defer(self, value: bool = True) -> Self:
        return self.set_attribute("defer", value)

    def nomodule(self, value: bool = True) -> Self:
        return self.set_attribute("nomodule", value)


class HasShadowRoot:
    """Declarative shadow DOM attributes of ``<template>``."""

    def shadowrootmode(self, value: Any) -> Self:
        return self.set_attribute("shadowrootmode", value)

    def shadowrootclonable(self, value: bool = True) -> Self:
        return self.set_attribute("shadowrootclonable", value)

    def shadowrootdelegatesfocus(self, value: bool = True) -> Self:
        return self.set_attribute("shadowrootdelegatesfocus", value)

    def shadowrootserializable(self, value: bool = True) -> Self:
        return self.set_attribute("shadowrootserializable", value)

    def shadowrootreferencetarget(self, value: str | None) -> Self:
        return self.set_attribute("shadowrootreferencetarget", value)


class HasBlocking:
    def blocking(self, value: str | None) -> Self:
        return self.set_attribute("blocking", value)
