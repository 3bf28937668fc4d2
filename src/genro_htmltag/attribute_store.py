# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""AttributeStore: immutable ordered mapping of HTML attributes.

Every operation returns a new store; the receiver is never modified. Keys
are canonicalized to their lowercase wire form and Enum members are stored
as their scalar value.

Example:
    >>> store = AttributeStore({'id': 'main'})
    >>> store = store.set('class_', 'box').set('hidden', True)
    >>> dict(store)
    {'id': 'main', 'class': 'box', 'hidden': True}
    >>> store.set('id', None).get('id', 'none')
    'none'
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any

from .exceptions import InvalidAttributeName


_NAME_PATTERN = re.compile(r"[^\s\"'<>/=\x00-\x1f\x7f]+")


def canonical_name(name: str | Enum) -> str:
    """Return the wire form of an attribute name.

    Enum members are replaced by their value, the name is lower-cased and a
    single trailing underscore is stripped (``class_`` -> ``class``).

    Raises:
        InvalidAttributeName: If the name is empty or contains whitespace,
            quotes, '<', '>', '/', '=' or control characters.
    """
    if isinstance(name, Enum):
        name = name.value
    name = str(name).strip().lower()
    if len(name) > 1 and name.endswith("_"):
        name = name[:-1]
    if not _NAME_PATTERN.fullmatch(name):
        raise InvalidAttributeName(name)
    return name


def canonical_value(value: Any) -> Any:
    """Return the stored form of an attribute value (Enum -> scalar)."""
    if isinstance(value, Enum):
        return value.value
    return value


class AttributeStore(Mapping):
    """Immutable ordered mapping from attribute name to value.

    Values can be str, bool, numbers, lists, dicts or zero-argument callables
    evaluated at render time. ``None`` never gets stored: it marks absence.

    Internal structure:
        _data: plain dict in insertion order, never exposed.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[Any, Any] | None = None) -> None:
        self._data: dict[str, Any] = {}
        if data:
            for key, value in data.items():
                if value is not None:
                    self._data[canonical_name(key)] = canonical_value(value)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> AttributeStore:
        store = cls.__new__(cls)
        store._data = data
        return store

    def __getitem__(self, name: str | Enum) -> Any:
        return self._data[canonical_name(name)]

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, (str, Enum)):
            return False
        try:
            return canonical_name(name) in self._data
        except InvalidAttributeName:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"AttributeStore({self._data!r})"

    def get(self, name: str | Enum, default: Any = None) -> Any:
        """Return the value of name, or default when absent."""
        return self._data.get(canonical_name(name), default)

    def set(self, name: str | Enum, value: Any) -> AttributeStore:
        """Return a new store with name mapped to value (None removes name)."""
        if value is None:
            return self.remove(name)
        data = dict(self._data)
        data[canonical_name(name)] = canonical_value(value)
        return self._from_dict(data)

    def remove(self, name: str | Enum) -> AttributeStore:
        """Return a new store without name. Missing names are ignored."""
        key = canonical_name(name)
        data = dict(self._data)
        data.pop(key, None)
        return self._from_dict(data)

    def merge(self, other: Mapping[Any, Any] | None, other_wins: bool = True) -> AttributeStore:
        """Return the union of this store and other.

        Args:
            other: Mapping to merge in. None values are skipped.
            other_wins: If True, other's value is kept on key collision.
                Colliding keys keep the position where they first appeared.

        Returns:
            A new AttributeStore.
        """
        data = dict(self._data)
        if other:
            for key, value in other.items():
                if value is None:
                    continue
                name = canonical_name(key)
                if other_wins or name not in data:
                    data[name] = canonical_value(value)
        return self._from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dict copy."""
        return dict(self._data)
