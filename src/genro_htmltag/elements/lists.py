# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Lists: ul, ol, li and description lists.

Ul and Ol build their items directly:

    >>> Ol.create().items('one', 'two').render()
    '<ol>\\n<li>\\none\\n</li>\\n<li>\\ntwo\\n</li>\\n</ol>'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..base import BlockTag
from ..traits.lists import CanBeReversed, HasListType, HasOrdinalValue, HasStart

if TYPE_CHECKING:
    from typing import Self


class Li(HasOrdinalValue, BlockTag):
    tag_name = "li"


class ListItems:
    """li() and items() of ul and ol."""

    def li(self, content: Any, value: int | str | None = None) -> Self:
        """Append a ``<li>`` with escaped content and an optional ordinal value."""
        item = Li.create().content(content)
        if value is not None:
            item = item.value(value)
        return self.append_child(item)

    def items(self, *contents: Any) -> Self:
        """Append one ``<li>`` per content."""
        tag = self
        for content in contents:
            tag = tag.li(content)
        return tag


class Ul(ListItems, BlockTag):
    tag_name = "ul"


class Ol(ListItems, HasStart, CanBeReversed, HasListType, BlockTag):
    tag_name = "ol"


class Dt(BlockTag):
    tag_name = "dt"


class Dd(BlockTag):
    tag_name = "dd"


class Dl(BlockTag):
    tag_name = "dl"

    def term(self, content: Any, *descriptions: Any) -> Self:
        """Append a ``<dt>`` followed by one ``<dd>`` per description."""
        tag = self.append_child(Dt.create().content(content))
        for description in descriptions:
            tag = tag.append_child(Dd.create().content(description))
        return tag
