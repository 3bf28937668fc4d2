# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Tests for document, flow, phrasing and embedded elements."""

import pytest

from genro_htmltag import (
    H1,
    A,
    AttributeInvalidValue,
    Body,
    Div,
    Head,
    Html,
    I,
    Img,
    Label,
    P,
    Section,
    Span,
    Target,
    Title,
    ValueNotInAllowedSet,
)


class TestDocument:
    """Tests for html, head and body."""

    def test_document(self):
        """A minimal document."""
        document = (
            Html.create()
            .lang('en')
            .append_child(Head.create().append_child(Title.create().content('Page')))
            .append_child(Body.create().append_child(P.create().content('Hi')))
        )
        assert document.render() == (
            '<html lang="en">\n<head>\n<title>Page</title>\n</head>\n'
            '<body>\n<p>\nHi\n</p>\n</body>\n</html>'
        )


class TestFlow:
    """Tests for grouping and sectioning elements."""

    def test_block_layout(self):
        """Sections and headings are blocks."""
        assert Section.create().append_child(H1.create().content('T')).render() == (
            '<section>\n<h1>\nT\n</h1>\n</section>'
        )

    def test_div_with_role(self):
        """role is validated against the WAI-ARIA roles."""
        assert Div.create().role('navigation').render() == '<div role="navigation">\n</div>'
        with pytest.raises(ValueNotInAllowedSet):
            Div.create().role('sidebar')


class TestPhrasing:
    """Tests for links and text-level elements."""

    def test_anchor(self):
        """A is inline with link attributes."""
        tag = A.create().href('/docs').target(Target.BLANK).rel(['noopener', 'noreferrer']).content('Docs')
        assert tag.render() == '<a href="/docs" target="_blank" rel="noopener noreferrer">Docs</a>'

    def test_anchor_download(self):
        """download renders bare or with a file name."""
        assert A.create().download().render() == '<a download></a>'
        assert A.create().download('report.pdf').render() == '<a download="report.pdf"></a>'

    def test_anchor_referrerpolicy(self):
        """referrerpolicy is validated."""
        with pytest.raises(ValueNotInAllowedSet):
            A.create().referrerpolicy('sometimes')

    def test_span_and_i(self):
        """Span and I are inline."""
        assert Span.create().append_child(I.create().content('x')).render() == '<span><i>x</i></span>'

    def test_label_for(self):
        """for_ sets the for attribute."""
        assert Label.create().for_('email').content('Email').render() == '<label for="email">Email</label>'


class TestImg:
    """Tests for <img>."""

    def test_render(self):
        """Img is void."""
        tag = Img.create().src('a.png').alt('A').width(100).height('50').loading('lazy')
        assert tag.render() == '<img src="a.png" alt="A" width="100" height="50" loading="lazy">'

    def test_dimensions_non_negative(self):
        """Negative dimensions are rejected."""
        with pytest.raises(AttributeInvalidValue):
            Img.create().width(-1)

    def test_loading_invalid(self):
        """loading accepts eager and lazy."""
        with pytest.raises(ValueNotInAllowedSet):
            Img.create().loading('later')

    def test_srcset_list(self):
        """srcset lists are joined with commas."""
        tag = Img.create().srcset(['a.png 1x', 'b.png 2x'])
        assert tag.get_attribute('srcset') == 'a.png 1x, b.png 2x'
