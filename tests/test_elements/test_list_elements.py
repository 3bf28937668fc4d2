# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for list elements."""

import pytest

from genro_htmltag import Dl, Li, Ol, Ul, ValueNotInAllowedSet
from genro_htmltag.values import ListType


class TestOl:
    """Tests for <ol>."""

    def test_render_empty(self):
        """An empty list has no blank line."""
        assert Ol.create().render() == '<ol>\n</ol>'

    def test_items(self):
        """items() appends one <li> per value."""
        assert Ol.create().items('value').render() == '<ol>\n<li>\nvalue\n</li>\n</ol>'

    def test_items_do_not_mutate(self):
        """The original list is untouched."""
        base = Ol.create()
        base.items('a', 'b')
        assert base.render() == '<ol>\n</ol>'

    def test_li_with_value(self):
        """li() accepts the ordinal value."""
        assert Ol.create().li('third', value=3).render() == '<ol>\n<li value="3">\nthird\n</li>\n</ol>'

    def test_li_content_escaped(self):
        """Item content is escaped."""
        assert Ol.create().li('<b>').get_content() == '<li>\n&lt;b&gt;\n</li>'

    def test_attributes(self):
        """start, reversed and type."""
        tag = Ol.create().start(3).reversed().type(ListType.UPPER_ALPHA)
        assert tag.render() == '<ol start="3" reversed type="A">\n</ol>'

    def test_type_invalid(self):
        """type accepts the numbering markers only."""
        assert Ol.create().type(1).render() == '<ol type="1">\n</ol>'
        with pytest.raises(ValueNotInAllowedSet) as exc_info:
            Ol.create().type('x')
        assert str(exc_info.value) == (
            "`x` is not a valid value for `type`. Allowed values are: '1', 'A', 'I', 'a', 'i'."
        )

    def test_global_defaults(self):
        """Global defaults are merged under create() attributes."""
        Ol.set_global_defaults({'class': 'from-global', 'id': 'id-global'})
        assert Ol.create({'id': 'value'}).render() == '<ol class="from-global" id="value">\n</ol>'


class TestUl:
    """Tests for <ul>."""

    def test_items(self):
        """Items render in order."""
        assert Ul.create().items('a', 'b').render() == '<ul>\n<li>\na\n</li>\n<li>\nb\n</li>\n</ul>'

    def test_items_observe_defaults(self):
        """Items are rendered with the <li> defaults in force at render time."""
        tag = Ul.create().items('a')
        Li.set_global_defaults({'class': 'item'})
        assert tag.render() == '<ul>\n<li class="item">\na\n</li>\n</ul>'


class TestDl:
    """Tests for description lists."""

    def test_term(self):
        """term() appends a <dt> and its <dd> descriptions."""
        tag = Dl.create().term('HTML', 'markup', 'language')
        assert tag.render() == (
            '<dl>\n<dt>\nHTML\n</dt>\n<dd>\nmarkup\n</dd>\n<dd>\nlanguage\n</dd>\n</dl>'
        )
