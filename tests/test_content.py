# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for ContentModel."""

import pytest

from genro_htmltag import ContentModel, Span


class TestContentModel:
    """Tests for the element body model."""

    def test_empty(self):
        """A new model is empty and renders nothing."""
        model = ContentModel()
        assert model.is_empty()
        assert model.render() == ''

    def test_encoded_text_is_escaped(self):
        """Encoded text escapes markup and quotes."""
        model = ContentModel().set_encoded('<a href="x">Tom & \'Jerry\'</a>')
        assert model.render() == '&lt;a href=&quot;x&quot;&gt;Tom &amp; &#x27;Jerry&#x27;&lt;/a&gt;'

    def test_raw_is_verbatim(self):
        """Raw fragments are inserted unchanged."""
        model = ContentModel().set_raw('<b>bold</b>')
        assert model.is_raw
        assert model.render() == '<b>bold</b>'

    def test_last_call_wins(self):
        """set_encoded and set_raw replace each other."""
        model = ContentModel().set_raw('<b>').set_encoded('<i>')
        assert not model.is_raw
        assert model.text == '<i>'
        assert model.render() == '&lt;i&gt;'

    def test_immutable(self):
        """Operations return new models."""
        model = ContentModel()
        model.set_encoded('x')
        model.append_child('<br>')
        assert model.is_empty()

    def test_children_on_own_lines(self):
        """Children are rendered after the text, one per line."""
        model = ContentModel().set_encoded('text').append_child('<hr>').append_child('<br>')
        assert model.render() == 'text\n<hr>\n<br>'
        assert len(model.children) == 2

    def test_nested_tag_child(self):
        """Nested tags are rendered at render time."""
        model = ContentModel().append_child(Span.create().content('x'))
        assert model.render() == '<span>x</span>'

    def test_invalid_child(self):
        """Only strings and tags are accepted as children."""
        with pytest.raises(TypeError):
            ContentModel().append_child(42)

    def test_equality(self):
        """Models with the same state are equal."""
        assert ContentModel().set_encoded('a') == ContentModel().set_encoded('a')
        assert ContentModel().set_encoded('a') != ContentModel().set_raw('a')
