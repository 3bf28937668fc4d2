# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Exceptions raised by genro-htmltag.

Every error is raised at the call that introduced the bad state (a fluent
setter or a render call) and is never swallowed by the library.

Hierarchy:
    HtmlTagError
    ├── ValueNotInAllowedSet   - enumerated attribute got an unknown value
    ├── AttributeInvalidValue  - range/pattern constrained attribute rejected
    ├── InvalidAttributeName   - attribute name unsafe to serialize
    ├── UnresolvableProvider   - default/theme provider cannot be used
    └── InvalidTagError        - bad tag name or begin/end on inline element
"""

from __future__ import annotations

from typing import Any


class HtmlTagError(Exception):
    """Base exception for genro-htmltag errors."""

    pass


class ValueNotInAllowedSet(HtmlTagError, ValueError):
    """Raised when a value is not a member of an attribute's enumeration.

    Attributes:
        value: The rejected value (normalized scalar form).
        attribute: The attribute name.
        allowed: Sorted tuple of accepted values.
    """

    def __init__(self, value: Any, attribute: str, allowed: tuple[Any, ...]) -> None:
        self.value = value
        self.attribute = attribute
        self.allowed = allowed
        accepted = "', '".join(str(v) for v in allowed)
        super().__init__(
            f"`{value}` is not a valid value for `{attribute}`. Allowed values are: '{accepted}'."
        )


class AttributeInvalidValue(HtmlTagError, ValueError):
    """Raised when a value violates an attribute constraint (e.g. tabindex >= -1).

    Attributes:
        value: The rejected value.
        attribute: The attribute name.
        constraint: Human readable description of the constraint.
    """

    def __init__(self, value: Any, attribute: str, constraint: str) -> None:
        self.value = value
        self.attribute = attribute
        self.constraint = constraint
        super().__init__(
            f"`{value}` is an invalid value for `{attribute}`. "
            f"The value must satisfy: `{constraint}`."
        )


class InvalidAttributeName(HtmlTagError, ValueError):
    """Raised when an attribute name is empty or holds characters that would
    break the markup (whitespace, quotes, '>', '/' or '=').

    Attributes:
        name: The rejected name.
    """

    def __init__(self, name: Any) -> None:
        self.name = name
        super().__init__(f"`{name}` is not a valid attribute name.")


class UnresolvableProvider(HtmlTagError):
    """Raised at render time when a provider reference cannot be used.

    Attributes:
        reference: The registered reference (instance, class or import string).
        reason: Why the reference could not be resolved.
    """

    def __init__(self, reference: Any, reason: str) -> None:
        self.reference = reference
        self.reason = reason
        super().__init__(f"Cannot resolve provider {reference!r}: {reason}")


class InvalidTagError(HtmlTagError, ValueError):
    """Raised for an empty tag name or begin/end on an inline or void element."""

    pass
