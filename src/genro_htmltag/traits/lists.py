# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""List attributes (``<ol>`` numbering, ``<li>`` ordinal value)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..base import attribute
from ..values import ListType

if TYPE_CHECKING:
    from typing import Self


class HasStart:
    def start(self, value: int | str | None) -> Self:
        """Set the ordinal of the first item."""
        return self.set_attribute("start", value)


class CanBeReversed:
    def reversed(self, value: bool = True) -> Self:
        return self.set_attribute("reversed", value)


class HasListType:
    @attribute("type", values=ListType)
    def type(self, value: Any) -> Self:
        """Set the numbering type ('1', 'a', 'A', 'i' or 'I')."""
        return self.set_attribute("type", value)


class HasOrdinalValue:
    def value(self, value: int | str | None) -> Self:
        return self.set_attribute("value", value)
