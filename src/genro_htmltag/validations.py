# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Validation utilities for tag attributes.

This module provides the checks run by fluent setters before a new tag is
produced. Checks are fail-fast: they raise immediately and never transform
a value beyond normalizing Enum members to their scalar.

Constraint classes (frozen dataclasses, callable):
    Regex: regex pattern for strings
    Range: min/max value constraints for numbers (ge, le, gt, lt)

Allowed value sets accepted by check_one_of:
    - an Enum class: Target
    - a Literal type: Literal['a', 'b']
    - any iterable of scalars or Enum members
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Literal, get_args, get_origin

from .exceptions import AttributeInvalidValue, ValueNotInAllowedSet

_INT_LIKE = re.compile(r"^[+-]?\d+$")


# --- Validator classes ---


@dataclass(frozen=True)
class Regex:
    """Regex pattern constraint for string validation."""

    pattern: str
    flags: int = 0
    label: str | None = None

    def __call__(self, value: Any) -> None:
        if not isinstance(value, str):
            raise TypeError("Regex validator requires a str")
        if re.fullmatch(self.pattern, value, self.flags) is None:
            raise ValueError(f"must match pattern '{self.pattern}'")

    @property
    def description(self) -> str:
        return self.label or f"value matches '{self.pattern}'"


@dataclass(frozen=True)
class Range:
    """Range constraint for numeric validation (Pydantic-style: ge, le, gt, lt)."""

    ge: float | None = None
    le: float | None = None
    gt: float | None = None
    lt: float | None = None

    def __call__(self, value: Any) -> None:
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            raise TypeError("Range validator requires int, float or Decimal")
        if self.ge is not None and value < self.ge:
            raise ValueError(f"must be >= {self.ge}")
        if self.le is not None and value > self.le:
            raise ValueError(f"must be <= {self.le}")
        if self.gt is not None and value <= self.gt:
            raise ValueError(f"must be > {self.gt}")
        if self.lt is not None and value >= self.lt:
            raise ValueError(f"must be < {self.lt}")

    @property
    def description(self) -> str:
        """Constraint as shown in error messages, e.g. 'value >= -1'."""
        parts = []
        for op, bound in ((">=", self.ge), (">", self.gt), ("<=", self.le), ("<", self.lt)):
            if bound is not None:
                parts.append(f"value {op} {_format_number(bound)}")
        return " and ".join(parts)


def _format_number(number: float) -> str:
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


# --- Normalization ---


def normalize_value(value: Any) -> Any:
    """Return the comparable scalar of value (Enum member -> its value)."""
    if isinstance(value, Enum):
        return value.value
    return value


def allowed_values(allowed: Any) -> tuple[Any, ...]:
    """Return the normalized allowed values of an Enum, Literal or iterable."""
    if isinstance(allowed, type) and issubclass(allowed, Enum):
        return tuple(member.value for member in allowed)
    if get_origin(allowed) is Literal:
        return tuple(normalize_value(v) for v in get_args(allowed))
    if isinstance(allowed, Iterable) and not isinstance(allowed, str):
        return tuple(normalize_value(v) for v in allowed)
    raise TypeError(f"Unsupported allowed values: {allowed!r}")


def _sorted_values(values: Iterable[Any]) -> tuple[Any, ...]:
    return tuple(sorted(values, key=str))


# --- Checks ---


def check_one_of(value: Any, allowed: Any, attribute: str) -> Any:
    """Check that value belongs to the allowed set.

    Args:
        value: Candidate value (scalar or Enum member). None is always valid.
        allowed: Enum class, Literal type or iterable of accepted values.
        attribute: Attribute name used in the error message.

    Returns:
        The normalized value.

    Raises:
        ValueNotInAllowedSet: If value is not in the allowed set (case-sensitive).
    """
    if value is None:
        return None
    scalar = normalize_value(value)
    accepted = allowed_values(allowed)
    # bool is an int subclass: True must not match 1
    if any(scalar == v and type(scalar) is type(v) for v in accepted):
        return scalar
    if not isinstance(scalar, bool) and isinstance(scalar, (int, float)):
        if str(scalar) in accepted:
            return scalar
    raise ValueNotInAllowedSet(scalar, attribute, _sorted_values(accepted))


def int_like(value: Any) -> Any:
    """Convert integer strings ('3', '-1') to int, leave anything else unchanged."""
    if isinstance(value, str) and _INT_LIKE.match(value.strip()):
        return int(value.strip())
    return value


def check_constraint(value: Any, constraint: Range | Regex, attribute: str) -> Any:
    """Check value against a Range or Regex constraint.

    Args:
        value: Candidate value. None is always valid.
        constraint: The constraint to apply.
        attribute: Attribute name used in the error message.

    Returns:
        The value, unchanged.

    Raises:
        AttributeInvalidValue: If the constraint rejects the value.
    """
    if value is None:
        return None
    candidate = normalize_value(value)
    if isinstance(constraint, Range):
        candidate = int_like(candidate)
    try:
        constraint(candidate)
    except (TypeError, ValueError) as e:
        raise AttributeInvalidValue(candidate, attribute, constraint.description) from e
    return normalize_value(value)
