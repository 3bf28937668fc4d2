# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tag - element whose name is chosen at runtime."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ..base import BaseTag
from ..renderer import end_tag, layout_for

if TYPE_CHECKING:
    from typing import Self


class _instance_or_class_method:
    """Bind the function to the instance when there is one, else to the class."""

    def __init__(self, func: Callable) -> None:
        self.func = func
        functools.update_wrapper(self, func)

    def __get__(self, instance: Any, owner: type | None = None) -> Callable:
        return functools.partial(self.func, owner if instance is None else instance)


class Tag(BaseTag):
    """Generic element. The layout follows the name (void, inline or block).

    Example:
        >>> Tag.create().set_tag_name('section').content('x').render()
        '<section>\\nx\\n</section>'

    Rendering without a name raises InvalidTagError.

    The name lives on the instance, so the closing tag comes from
    ``tag.end()``, or from ``Tag.end('section')`` at class level.
    """

    def set_tag_name(self, name: str) -> Self:
        return self._with_option("tag_name", name.strip().lower())

    def _get_tag_name(self) -> str:
        return self._option("tag_name", "")

    def _get_layout(self) -> str:
        return layout_for(self._get_tag_name())

    @_instance_or_class_method
    def end(self_or_cls: Any, tag_name: str | None = None) -> str:  # type: ignore[override]
        """Render the closing tag matching begin().

        Raises:
            InvalidTagError: If no name is known, or the element is inline or void.
        """
        if tag_name is None:
            tag_name = "" if isinstance(self_or_cls, type) else self_or_cls._get_tag_name()
        return "\n" + end_tag(tag_name)
