# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for attribute value validation."""

from typing import Literal

import pytest

from genro_htmltag import AttributeInvalidValue, Range, Regex, ValueNotInAllowedSet
from genro_htmltag.validations import (
    allowed_values,
    check_constraint,
    check_one_of,
    int_like,
    normalize_value,
)
from genro_htmltag.values import ListType, Target


class TestRange:
    """Tests for the Range constraint."""

    def test_accepts_in_range(self):
        """Values inside the bounds pass."""
        Range(ge=-1)(-1)
        Range(gt=0, le=10)(10)

    def test_rejects_out_of_range(self):
        """Values outside the bounds raise ValueError."""
        with pytest.raises(ValueError):
            Range(ge=-1)(-2)
        with pytest.raises(ValueError):
            Range(gt=0)(0)

    def test_rejects_bool(self):
        """Booleans are not numbers for a Range."""
        with pytest.raises(TypeError):
            Range(ge=0)(True)

    def test_description(self):
        """Descriptions read like the error messages."""
        assert Range(ge=-1).description == 'value >= -1'
        assert Range(gt=0).description == 'value > 0'
        assert Range(ge=1, le=5).description == 'value >= 1 and value <= 5'


class TestRegex:
    """Tests for the Regex constraint."""

    def test_full_match(self):
        """The pattern must match the whole value."""
        Regex(r'[a-z]+')('abc')
        with pytest.raises(ValueError):
            Regex(r'[a-z]+')('abc1')

    def test_requires_str(self):
        """Non strings raise TypeError."""
        with pytest.raises(TypeError):
            Regex(r'\d+')(12)

    def test_label_description(self):
        """label replaces the default description."""
        assert Regex(r'x', label='an x').description == 'an x'
        assert Regex(r'x').description == "value matches 'x'"


class TestAllowedValues:
    """Tests for allowed value normalization."""

    def test_enum(self):
        """Enum classes yield their values."""
        assert allowed_values(Target) == ('_blank', '_parent', '_self', '_top')

    def test_literal(self):
        """Literal types yield their arguments."""
        assert allowed_values(Literal['a', 'b']) == ('a', 'b')

    def test_iterable(self):
        """Iterables are normalized."""
        assert allowed_values([Target.TOP, 'x']) == ('_top', 'x')

    def test_unsupported(self):
        """Plain strings are not an allowed set."""
        with pytest.raises(TypeError):
            allowed_values('abc')

    def test_normalize_value(self):
        """Enum members normalize to their value."""
        assert normalize_value(Target.SELF) == '_self'
        assert normalize_value('x') == 'x'


class TestCheckOneOf:
    """Tests for enumerated value checks."""

    def test_valid_string(self):
        """Known values are returned."""
        assert check_one_of('_blank', Target, 'target') == '_blank'

    def test_valid_enum(self):
        """Enum members are returned as scalars."""
        assert check_one_of(Target.PARENT, Target, 'target') == '_parent'

    def test_none_is_valid(self):
        """None is always accepted."""
        assert check_one_of(None, Target, 'target') is None

    def test_case_sensitive(self):
        """Membership is case sensitive."""
        with pytest.raises(ValueNotInAllowedSet):
            check_one_of('_BLANK', Target, 'target')

    def test_error_message(self):
        """The error lists the sorted allowed values."""
        with pytest.raises(ValueNotInAllowedSet) as exc_info:
            check_one_of('invalid-value', Target, 'target')
        assert str(exc_info.value) == (
            "`invalid-value` is not a valid value for `target`. "
            "Allowed values are: '_blank', '_parent', '_self', '_top'."
        )
        assert exc_info.value.attribute == 'target'
        assert exc_info.value.value == 'invalid-value'

    def test_is_value_error(self):
        """Validation errors are ValueErrors."""
        with pytest.raises(ValueError):
            check_one_of('x', Target, 'target')

    def test_number_matches_string(self):
        """A number matches its string form."""
        assert check_one_of(1, ListType, 'type') == 1

    def test_bool_does_not_match(self):
        """True does not match '1' nor 1."""
        with pytest.raises(ValueNotInAllowedSet):
            check_one_of(True, [1, 'a'], 'x')


class TestCheckConstraint:
    """Tests for constraint checks."""

    def test_valid(self):
        """Satisfied constraints return the value."""
        assert check_constraint(0, Range(ge=-1), 'tabindex') == 0

    def test_int_like_string(self):
        """Integer strings are accepted by numeric constraints."""
        assert check_constraint('3', Range(gt=0), 'cols') == '3'
        assert int_like(' -1 ') == -1
        assert int_like('1.5') == '1.5'

    def test_none_is_valid(self):
        """None is always accepted."""
        assert check_constraint(None, Range(ge=0), 'x') is None

    def test_error_message(self):
        """The error shows the constraint description."""
        with pytest.raises(AttributeInvalidValue) as exc_info:
            check_constraint(-2, Range(ge=-1), 'tabindex')
        assert str(exc_info.value) == (
            '`-2` is an invalid value for `tabindex`. The value must satisfy: `value >= -1`.'
        )

    def test_non_numeric_string(self):
        """Strings that are not integers fail numeric constraints."""
        with pytest.raises(AttributeInvalidValue):
            check_constraint('abc', Range(ge=0), 'width')

    def test_regex_constraint(self):
        """Regex constraints validate strings."""
        assert check_constraint('en-US', Regex(r'[A-Za-z]{2,3}(-[A-Za-z0-9]{1,8})*'), 'lang') == 'en-US'
        with pytest.raises(AttributeInvalidValue):
            check_constraint('e', Regex(r'[A-Za-z]{2,3}'), 'lang')
